from tls_client import Session
from tls_client.exceptions import TLSClientExeption

from modules.errors import ErrorKind, SequenceError, TaskAttemptError
from modules.models import (
    ProxyEndpoint,
    Decoded,
    decode_nonce,
    decode_exp,
    decode_tasks,
    decode_task_verify,
)
import modules.config as config
import settings


class Browser:
    def __init__(self, proxy: ProxyEndpoint | None = None, session=None):
        self.proxy = proxy
        self.base_url = settings.API_BASE_URL
        self.session = session or self.get_new_session()


    def get_new_session(self):
        try:
            session = Session(
                client_identifier=settings.CLIENT_IDENTIFIER,
                random_tls_extension_order=True
            )
        except Exception as err:
            raise SequenceError(ErrorKind.SETUP, f'cannot create session: {err}', proxy=self.proxy_host)

        session.headers.update({
            "user-agent": settings.USER_AGENT,
            "accept": "application/json, text/plain, */*",
            "origin": settings.ORIGIN_URL,
            "referer": settings.REFERER_URL,
        })
        if self.proxy:
            session.proxies.update({'http': self.proxy.url, 'https': self.proxy.url})

        return session


    @property
    def proxy_host(self):
        return self.proxy.host if self.proxy else None


    def close(self):
        close = getattr(self.session, "close", None)
        if close: close()


    def request(self, method: str, endpoint: str, error_cls=SequenceError, error_kwargs: dict = None, **kwargs):
        error_kwargs = error_kwargs or {}
        context = {"endpoint": endpoint, "method": method, "proxy": self.proxy_host, **error_kwargs}

        try:
            r = self.session.execute_request(
                method=method,
                url=f'{self.base_url}{endpoint}',
                timeout_seconds=settings.REQUEST_TIMEOUT,
                **kwargs
            )
        except TLSClientExeption as err:
            raise error_cls(kind=ErrorKind.TRANSPORT, message=str(err), **context)
        except Exception as err:
            raise error_cls(kind=ErrorKind.SETUP, message=str(err), **context)

        if not 200 <= r.status_code < 300:
            raise error_cls(
                kind=ErrorKind.STATUS,
                message=self.error_message(r.text) or f'HTTP {r.status_code}',
                status=r.status_code,
                **context
            )
        return r


    @staticmethod
    def error_message(text: str):
        message = decode_task_verify(text).value
        return message or (text or '')[:200]


    def unwrap(self, decoded: Decoded, method: str, endpoint: str):
        if not decoded.ok:
            raise SequenceError(ErrorKind.DECODE, decoded.error, endpoint=endpoint, method=method, proxy=self.proxy_host)
        return decoded.value


    def get_nonce(self):
        endpoint = config.ENDPOINTS["nonce"]
        r = self.request("GET", endpoint)
        return self.unwrap(decode_nonce(r.text), "GET", endpoint)


    def login(self, message: str, signature: str):
        self.request("POST", config.ENDPOINTS["login"], json={"message": message, "signature": signature})


    def get_exp(self):
        endpoint = config.ENDPOINTS["exp"]
        r = self.request("GET", endpoint)
        return self.unwrap(decode_exp(r.text), "GET", endpoint)


    def get_tasks(self):
        endpoint = config.ENDPOINTS["tasks"]
        r = self.request("GET", endpoint)
        return self.unwrap(decode_tasks(r.text), "GET", endpoint)


    def verify_task(self, task_id, attempt: int = 1):
        r = self.request(
            "GET",
            config.ENDPOINTS["verify_task"].format(task_id=task_id),
            error_cls=TaskAttemptError,
            error_kwargs={"task_id": task_id, "attempt": attempt},
        )
        return decode_task_verify(r.text).value
