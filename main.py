from time import sleep
import sys

from modules.utils import logger, setup_logger, sleeping, choose_mode, make_text_border
from modules.events import SHUTDOWN
from modules import *
import modules.config as config
import settings


def runner(mode: str, bus: EventBus):
    dashboard = Dashboard(bus=bus) if mode == "dashboard" else None
    ConsoleRelay(bus=bus)

    if dashboard: dashboard.start()
    else: print(make_text_border(config.BANNER))

    try:
        privatekeys = load_private_keys(bus=bus, file_name=settings.PRIVATEKEYS_FILE)
        proxies = load_proxies(bus=bus, file_name=settings.PROXIES_FILE)

        run_all(
            bus=bus,
            privatekeys=privatekeys,
            proxies=proxies,
            delays=DelayPolicy.from_settings(settings.DELAYS),
            sleeper=sleep if dashboard else sleeping,
        )
        bus.log('INFO', 'Bot finished its run')
        if dashboard:
            bus.log('INFO', 'Press q / esc / ctrl+c to exit')
            while True: sleep(1)
        return 0

    except StartupConfigError as err:
        bus.log('ERROR', str(err))
        if dashboard: sleep(2)
        return 1

    except KeyboardInterrupt:
        bus.emit(SHUTDOWN)
        return 0

    finally:
        if dashboard: dashboard.stop()


if __name__ == '__main__':
    bus = EventBus()
    bus.subscribe(SHUTDOWN, lambda _: logger.warning('Termination signal received. Shutting down...'))

    mode = "dashboard" if settings.SHOW_DASHBOARD else "console"
    if settings.ASK_MODE:
        mode = choose_mode()
    if mode == "exit": sys.exit(0)

    setup_logger(console=mode == "console", log_file=settings.LOG_FILE)
    sys.exit(runner(mode=mode, bus=bus))
