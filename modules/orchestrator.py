from typing import Callable
from time import sleep

from modules.models import ProxyEndpoint, DelayPolicy
from modules.events import EventBus
from modules.quest import QuestRunner


def pick_proxy(proxies: list[ProxyEndpoint] | None, index: int):
    if not proxies: return None
    return proxies[index % len(proxies)]


def run_all(
        bus: EventBus,
        privatekeys: list[str],
        proxies: list[ProxyEndpoint] | None = None,
        delays: DelayPolicy | None = None,
        sleeper: Callable[[float], None] = sleep,
        quest: QuestRunner | None = None,
):
    delays = delays or DelayPolicy()
    quest = quest or QuestRunner(bus=bus, delays=delays, sleeper=sleeper)
    total = len(privatekeys)

    start_message = f'Starting bot for {total} wallet(s)'
    if proxies: start_message += f' using {len(proxies)} proxies (rotating)'
    else: start_message += ' (direct connections)'
    bus.log('INFO', start_message)
    bus.status(walletsCount=total, status='Initializing...')

    for index, privatekey in enumerate(privatekeys):
        try:
            quest.run(privatekey=privatekey, index=index, total=total, proxy=pick_proxy(proxies, index))
        except Exception as err:
            bus.log('ERROR', f'Unexpected error for wallet {index + 1}, skipping it: {err}')

        if index < total - 1:
            bus.log('WAIT', f'--- Pausing {delays.between_wallets:g}s before next wallet ---')
            if delays.between_wallets > 0: sleeper(delays.between_wallets)

    bus.log('INFO', f'All {total} wallets processed! Bot run complete')
    bus.status(status='Finished All Wallets')
