from dataclasses import dataclass, fields
from urllib.parse import quote
from typing import Any
import json


@dataclass(frozen=True)
class ProxyEndpoint:
    host: str
    port: int
    username: str | None = None
    password: str | None = None

    @property
    def url(self):
        auth = ''
        if self.username is not None and self.password is not None:
            auth = f'{quote(self.username, safe="")}:{quote(self.password, safe="")}@'
        return f'http://{auth}{self.host}:{self.port}'


@dataclass(frozen=True)
class TaskUnit:
    id: Any
    completed: bool


@dataclass
class StatusRecord:
    walletsCount: int = 0
    status: str = 'Initializing...'

    def merge(self, update: dict):
        for key, value in update.items():
            if hasattr(self, key): setattr(self, key, value)
        return self


@dataclass(frozen=True)
class DelayPolicy:
    after_nonce: float = 0.5
    after_sign: float = 0.5
    after_login: float = 1
    after_exp: float = 0.5
    after_tasks: float = 1
    between_tasks: float = 5
    between_wallets: float = 10

    @classmethod
    def from_settings(cls, delays: dict):
        known = {f.name for f in fields(cls)}
        unknown = set(delays) - known
        if unknown:
            raise ValueError(f'Unknown delay sites in settings: {", ".join(sorted(unknown))}')
        return cls(**delays)

    @classmethod
    def disabled(cls):
        return cls(**{f.name: 0 for f in fields(cls)})


@dataclass(frozen=True)
class Decoded:
    ok: bool
    value: Any = None
    error: str | None = None

    @classmethod
    def success(cls, value):
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str):
        return cls(ok=False, error=error)


def _load_json(text: str):
    try:
        return True, json.loads(text)
    except ValueError:
        return False, None


def decode_nonce(text: str) -> Decoded:
    text = (text or '').strip()
    if not text:
        return Decoded.failure('empty nonce response')

    # anything but a JSON string or {"nonce": ...} is the nonce itself
    _, body = _load_json(text)
    if isinstance(body, dict): body = body.get('nonce')
    if isinstance(body, str) and body:
        return Decoded.success(body)
    if isinstance(body, int) and not isinstance(body, bool):
        return Decoded.success(str(body))
    return Decoded.success(text)


def decode_exp(text: str) -> Decoded:
    _, body = _load_json((text or "").strip())
    if isinstance(body, dict): body = body.get('exp')
    if isinstance(body, (int, float)) and not isinstance(body, bool):
        return Decoded.success(body)
    if isinstance(body, str):
        try: return Decoded.success(int(body))
        except ValueError: pass
    return Decoded.failure(f'unexpected EXP payload: {(text or "")[:100]}')


def decode_tasks(text: str) -> Decoded:
    is_json, body = _load_json(text or '')
    if not is_json or not isinstance(body, list):
        return Decoded.failure(f'task list is not an array: {(text or "")[:100]}')

    tasks = []
    for item in body:
        if not isinstance(item, dict) or item.get('id') is None:
            return Decoded.failure(f'task without id: {str(item)[:100]}')
        tasks.append(TaskUnit(id=item['id'], completed=bool(item.get('completed', False))))
    return Decoded.success(tasks)


def decode_task_verify(text: str) -> Decoded:
    is_json, body = _load_json(text or '')
    if is_json and isinstance(body, dict) and isinstance(body.get('message'), str):
        return Decoded.success(body['message'])
    return Decoded.success(None)
