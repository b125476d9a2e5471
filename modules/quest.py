from typing import Callable
from time import sleep

from modules.errors import SequenceError, ErrorKind
from modules.models import ProxyEndpoint, DelayPolicy
from modules.events import EventBus
from modules.browser import Browser
from modules.wallet import Wallet


class QuestRunner:
    def __init__(
            self,
            bus: EventBus,
            delays: DelayPolicy,
            sleeper: Callable[[float], None] = sleep,
            browser_factory: Callable[[ProxyEndpoint | None], Browser] = Browser,
    ):
        self.bus = bus
        self.delays = delays
        self.sleeper = sleeper
        self.browser_factory = browser_factory


    def pause(self, seconds: float):
        if seconds > 0: self.sleeper(seconds)


    def run(self, privatekey: str, index: int, total: int, proxy: ProxyEndpoint | None = None):
        number = index + 1
        label = f'[Wallet {number}]'
        browser = None

        try:
            wallet = Wallet(privatekey=privatekey)
            start_message = f'--- Wallet {number}/{total}: {wallet.short_address}'
            if proxy:
                self.bus.log('INFO', f'Using proxy {proxy.host} for Wallet {number}')
                start_message += f' (via proxy {proxy.host}) ---'
            else:
                start_message += ' (direct connection) ---'
            self.bus.log('INFO', start_message)
            self.bus.status(status=f'Processing Wallet {number}/{total}')

            browser = self.browser_factory(proxy)

            self.bus.log('WAIT', f'{label} 1. Fetching nonce...')
            nonce = browser.get_nonce()
            self.bus.log('INFO', f'{label} 1. Nonce received')
            self.pause(self.delays.after_nonce)

            self.bus.log('WAIT', f'{label} 2. Signing message...')
            message = wallet.build_login_message(nonce=nonce)
            signature = wallet.sign_message(message)
            self.bus.log('INFO', f'{label} 2. Message signed')
            self.pause(self.delays.after_sign)

            self.bus.log('WAIT', f'{label} 3. Verifying signature (log in)...')
            browser.login(message=message, signature=signature)
            self.bus.log('SUCCESS', f'{label} 3. Login successful')
            self.pause(self.delays.after_login)

            self.bus.log('WAIT', f'{label} 4. Fetching EXP...')
            exp = browser.get_exp()
            self.bus.log('INFO', f'{label} 4. Current EXP: {exp}')
            self.pause(self.delays.after_exp)

            self.bus.log('WAIT', f'{label} 5. Fetching available tasks...')
            pending = [task for task in browser.get_tasks() if not task.completed]
            if pending:
                task_ids = ', '.join(str(task.id) for task in pending)
                self.bus.log('INFO', f'{label} 5. Found {len(pending)} incomplete tasks (IDs: {task_ids})')
            else:
                self.bus.log('INFO', f'{label} 5. No incomplete tasks found')
            self.pause(self.delays.after_tasks)

            verified = self.verify_tasks(browser=browser, tasks=pending, label=label)
            if pending:
                self.bus.log('INFO', f'{label} Attempted verification for {len(pending)} tasks, {verified} successful')

            self.bus.log('SUCCESS', f'{label} Wallet {number} completed successfully')

        except SequenceError as err:
            self.bus.log('ERROR', err.describe(wallet_label=f'wallet {number}'))

        except Exception as err:
            self.bus.log('ERROR', SequenceError(ErrorKind.GENERIC, str(err)).describe(wallet_label=f'wallet {number}'))

        finally:
            if browser: browser.close()
            self.bus.status(status=f'Finished Wallet {number}/{total}')


    def verify_tasks(self, browser: Browser, tasks: list, label: str):
        verified = 0
        for task_number, task in enumerate(tasks, start=1):
            self.bus.log('WAIT', f'{label} 6. Task {task_number}: verifying (ID: {task.id})...')
            try:
                server_message = browser.verify_task(task_id=task.id)
                self.bus.log('SUCCESS', f'{label} 6. Task {task_number}: {server_message or "Verified"} (ID: {task.id})')
                verified += 1
            except SequenceError as err:
                self.bus.log('WARN', f'{label} 6. Task {task_number} verification failed (ID: {task.id}): {err.message}')

            self.bus.log('WAIT', f'--- Pausing {self.delays.between_tasks:g}s before next task ---')
            self.pause(self.delays.between_tasks)

        return verified
