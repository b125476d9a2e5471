from .utils import logger, setup_logger, sleeping, choose_mode, make_text_border, ConsoleRelay
from .events import EventBus, LogEvent
from .errors import StartupConfigError, SequenceError, TaskAttemptError, ErrorKind
from .models import ProxyEndpoint, TaskUnit, StatusRecord, DelayPolicy
from .loaders import load_private_keys, load_proxies
from .browser import Browser
from .wallet import Wallet
from .quest import QuestRunner
from .orchestrator import run_all
from .dashboard import Dashboard
