from enum import Enum


class ErrorKind(Enum):
    STATUS = "API Error"
    TRANSPORT = "Network Error"
    SETUP = "Setup Error"
    SIGNATURE = "Signature Error"
    DECODE = "Response Error"
    GENERIC = "General Error"


class StartupConfigError(Exception):
    pass


class SequenceError(Exception):
    """Failure of one remote call or local step, tagged where it was raised."""

    def __init__(
            self,
            kind: ErrorKind,
            message: str,
            endpoint: str | None = None,
            method: str | None = None,
            status: int | None = None,
            attempt: int = 1,
            proxy: str | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.endpoint = endpoint
        self.method = method
        self.status = status
        self.attempt = attempt
        self.proxy = proxy


    def describe(self, wallet_label: str):
        via = f'(via proxy {self.proxy})' if self.proxy else '(direct)'
        match self.kind:
            case ErrorKind.STATUS:
                return f'{self.kind.value} ({self.status}) for {wallet_label} on {self.method} {self.endpoint} {via}: {self.message}'
            case ErrorKind.TRANSPORT | ErrorKind.DECODE:
                return f'{self.kind.value} for {wallet_label} on {self.method} {self.endpoint} {via}: {self.message}'
            case ErrorKind.SETUP:
                return f'{self.kind.value} for {wallet_label} {via}: {self.message}'
            case _:
                return f'{self.kind.value} for {wallet_label}: {self.message}'


class TaskAttemptError(SequenceError):
    def __init__(self, task_id, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.task_id = task_id
