from collections import deque
from datetime import datetime
from threading import Lock, Thread, Event
import _thread
import sys
import os

from rich.console import Console, Group
from rich.markup import escape
from rich.layout import Layout
from rich.panel import Panel
from rich.table import Table
from rich.live import Live
from rich.text import Text

from modules.events import EventBus, LogEvent, LOG, STATUS_UPDATE
from modules.models import StatusRecord
import modules.config as config


QUIT_KEYS = ('q', 'Q', '\x1b')


def format_log_line(level: str, message: str, timestamp: datetime):
    style = config.LEVEL_STYLES[level]
    icon = config.LEVEL_ICONS[level]
    return f'[dim]{timestamp:%H:%M:%S}[/dim] [{style}]{icon} {escape(message)}[/{style}]'


class Dashboard:
    def __init__(self, bus: EventBus, console: Console | None = None, max_lines: int = 300):
        self.bus = bus
        self.console = console or Console()
        self.main_log = deque(maxlen=max_lines)
        self.success_log = deque(maxlen=max_lines)
        self.status = StatusRecord()
        self.counters = {level: 0 for level in config.LEVEL_STYLES}
        self.lock = Lock()
        self.live = None
        self.key_listener = None

        bus.subscribe(LOG, self.on_log)
        bus.subscribe(STATUS_UPDATE, self.on_status)


    def on_log(self, event: LogEvent):
        now = datetime.now()
        with self.lock:
            self.counters[event.level] += 1
            for line in event.message.strip('\n').splitlines() or ['']:
                formatted = format_log_line(event.level, line, now)
                self.main_log.append(formatted)
                if event.level == 'SUCCESS':
                    self.success_log.append(formatted)


    def on_status(self, update: dict):
        with self.lock:
            self.status.merge(update)


    def log_panel(self, title: str, lines: deque, height: int, border_style: str):
        visible = list(lines)[-max(height, 1):]
        return Panel(
            Group(*[Text.from_markup(line, overflow="ellipsis") for line in visible]),
            title=f'[bold]{title}[/bold]',
            border_style=border_style,
        )


    def status_panel(self):
        table = Table.grid(padding=(0, 1))
        table.add_column(style="cyan")
        table.add_column()
        table.add_row("Wallets", str(self.status.walletsCount))
        table.add_row("Status", escape(str(self.status.status)))
        table.add_row("Success", f'[green]{self.counters["SUCCESS"]}[/green]')
        table.add_row("Warnings", f'[dark_orange]{self.counters["WARN"]}[/dark_orange]')
        table.add_row("Errors", f'[red]{self.counters["ERROR"]}[/red]')
        table.add_row("", "[dim]q / esc / ctrl+c to quit[/dim]")
        return Panel(table, title='[bold]Status Panel[/bold]', border_style="cyan")


    def render(self):
        height = self.console.size.height
        layout = Layout()
        layout.split_column(
            Layout(Panel(Text(config.BANNER, justify="center", style="bold"), border_style="magenta"), size=3),
            Layout(name="body"),
        )
        layout["body"].split_row(Layout(name="main", ratio=65), Layout(name="side", ratio=35))
        layout["side"].split_column(Layout(name="success"), Layout(name="status"))

        with self.lock:
            layout["main"].update(self.log_panel("Main Log", self.main_log, height - 5, "white"))
            layout["success"].update(self.log_panel("Success Log", self.success_log, height // 2 - 4, "green"))
            layout["status"].update(self.status_panel())
        return layout


    def __rich__(self):
        return self.render()


    def start(self):
        self.live = Live(self, console=self.console, screen=True, refresh_per_second=4)
        self.live.start()
        if os.name != 'nt' and sys.stdin.isatty():
            self.key_listener = KeyListener(on_quit=self.request_shutdown)
            self.key_listener.start()


    def request_shutdown(self):
        # main thread emits the shutdown event on KeyboardInterrupt
        _thread.interrupt_main()


    def stop(self):
        if self.key_listener:
            self.key_listener.stop()
            self.key_listener = None
        if self.live:
            self.live.stop()
            self.live = None
        self.bus.unsubscribe(LOG, self.on_log)
        self.bus.unsubscribe(STATUS_UPDATE, self.on_status)


class KeyListener(Thread):
    """Reads single keys from a POSIX terminal and calls `on_quit` for q / esc."""

    def __init__(self, on_quit):
        super().__init__(daemon=True)
        self.on_quit = on_quit
        self.stopped = Event()
        self.old_settings = None


    def run(self):
        import termios
        import select
        import tty

        fd = sys.stdin.fileno()
        self.old_settings = termios.tcgetattr(fd)
        try:
            tty.setcbreak(fd)
            while not self.stopped.is_set():
                ready, _, _ = select.select([sys.stdin], [], [], 0.2)
                if ready and sys.stdin.read(1) in QUIT_KEYS:
                    self.on_quit()
                    break
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, self.old_settings)


    def stop(self):
        self.stopped.set()
        if self.is_alive(): self.join(timeout=1)
