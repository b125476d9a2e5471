from os import path
import re

from modules.errors import StartupConfigError
from modules.events import EventBus
from modules.models import ProxyEndpoint


PRIVATEKEY_PATTERN = re.compile(r'^[a-fA-F0-9]{64}$')


def read_lines(file_name: str):
    with open(file_name, encoding='utf-8-sig', errors='replace') as f:
        lines = [line.strip() for line in f.read().splitlines()]
    return [line for line in lines if line and not line.startswith('#')]


def load_private_keys(bus: EventBus, file_name: str):
    file_label = path.basename(file_name)
    bus.log('WAIT', f'Loading wallets from {file_label}...')

    try:
        lines = read_lines(file_name)
    except FileNotFoundError:
        raise StartupConfigError(f"Wallet file '{file_label}' not found. Please create it.")
    except OSError as err:
        raise StartupConfigError(f'Cannot read wallet file {file_label}: {err}')

    private_keys = []
    for line_number, line in enumerate(lines, start=1):
        if PRIVATEKEY_PATTERN.match(line):
            private_keys.append(line)
        else:
            bus.log('WARN', f'Ignoring invalid private key at entry {line_number} in {file_label}')

    if not private_keys:
        raise StartupConfigError(f"No valid 64-character hex private keys found in '{file_label}'")

    bus.log('INFO', f'Loaded {len(private_keys)} private keys')
    return private_keys


def parse_proxy(line: str):
    if '\ufffd' in line: return None
    parts = line.split(':')
    if len(parts) not in [2, 4] or not all(parts): return None
    if not (parts[1].isascii() and parts[1].isdigit()) or not 0 < int(parts[1]) < 65536: return None

    if len(parts) == 4:
        return ProxyEndpoint(host=parts[0], port=int(parts[1]), username=parts[2], password=parts[3])
    return ProxyEndpoint(host=parts[0], port=int(parts[1]))


def load_proxies(bus: EventBus, file_name: str):
    file_label = path.basename(file_name)
    bus.log('WAIT', f'Checking for proxies in {file_label}...')

    try:
        lines = read_lines(file_name)
    except FileNotFoundError:
        bus.log('INFO', f"Proxy file '{file_label}' not found. Proceeding without proxies")
        return []
    except OSError as err:
        bus.log('ERROR', f'Error loading proxy file: {err}. Proceeding without proxies')
        return []

    if not lines:
        bus.log('WARN', f"Proxy file '{file_label}' is empty. Proceeding without proxies")
        return []

    proxies = []
    for line in lines:
        proxy = parse_proxy(line)
        if proxy: proxies.append(proxy)
        # host only, the line may carry credentials
        else: bus.log('WARN', f'Ignoring invalid proxy format: "{line.split(":")[0]}:..."')

    if not proxies:
        bus.log('WARN', f"No valid proxies found in '{file_label}'. Proceeding without proxies")
        return []

    bus.log('INFO', f'Loaded {len(proxies)} proxies')
    return proxies
