from datetime import datetime
from loguru import logger
from time import sleep
from tqdm import tqdm
import sys

sys.__stdout__ = sys.stdout # error with `import inquirer` without this string in some system
from inquirer import prompt, List

from modules.events import EventBus, LogEvent, LOG
import modules.config as config


CONSOLE_FORMAT = "<white>{time:HH:mm:ss}</white> | <level>{message}</level>"
FILE_FORMAT = "{time:MM/DD/YYYY - HH:mm:ss} | {level: <8} | {message}"

MODES = {
    "dashboard": "Run with dashboard",
    "console": "Run in console",
    "exit": "Exit",
}

try: logger.level("WAIT")
except ValueError: logger.level("WAIT", no=22, color="<yellow>")


def setup_logger(console: bool, log_file: str | None = None):
    logger.remove()
    if console:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level="INFO")
    if log_file:
        logger.add(log_file, format=FILE_FORMAT, level="DEBUG", rotation="5 MB", encoding="utf-8")


class ConsoleRelay:
    """Writes every bus log event through loguru."""

    def __init__(self, bus: EventBus):
        self.bus = bus
        bus.subscribe(LOG, self.on_log)


    def on_log(self, event: LogEvent):
        for line in event.message.strip('\n').splitlines() or ['']:
            logger.log(config.LOGURU_LEVELS[event.level], line)


    def close(self):
        self.bus.unsubscribe(LOG, self.on_log)


def sleeping(*timing):
    if type(timing[0]) == list: timing = timing[0]
    x = timing[0]
    if x < 1:
        sleep(x)
        return

    desc = datetime.now().strftime('%H:%M:%S')
    for _ in tqdm(range(int(x)), desc=desc, bar_format='{desc} | [•] Sleeping {n_fmt}/{total_fmt}'):
        sleep(1)
    sleep(x - int(x))


def make_text_border(text: str):
    new_text = ''
    space = ' ' * 12
    max_len = max([len(string) for string in text.split('\n')])

    new_text += f'{space}+' + '—' * (max_len + 12) + f'+\n{space}│{" " * (max_len + 12)}│\n'
    for string in text.split('\n'): new_text += f'{space}│      {string}{" " * (max_len + 6 - len(string))}│\n'
    new_text += f'{space}│{" " * (max_len + 12)}│\n{space}+' + '—' * (max_len + 12) + '+\n'

    return new_text


def choose_mode():
    questions = [
        List('prefered_path', message="Choose action",
             choices=list(MODES.values()))]
    answer = prompt(questions)
    if not answer: return "exit"

    return {label: mode for mode, label in MODES.items()}[answer['prefered_path']]
