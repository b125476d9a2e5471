from eth_account.messages import encode_defunct
from datetime import datetime, timezone
from web3 import Web3

from modules.errors import ErrorKind, SequenceError
import modules.config as config
import settings


class Wallet:
    def __init__(self, privatekey: str):
        self.privatekey = privatekey
        self.account = Web3().eth.account.from_key(privatekey)
        self.address = self.account.address


    @property
    def short_address(self):
        return f'{self.address[:6]}...{self.address[-4:]}'


    def build_login_message(self, nonce: str, issued_at: datetime | None = None):
        issued_at = issued_at or datetime.now(timezone.utc)
        timestamp = issued_at.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

        return f'{settings.ORIGIN_URL} wants you to sign in with your Ethereum account:\n' \
               f'{self.address}\n\n' \
               f'{config.SIWE_STATEMENT}\n\n' \
               f'URI: {settings.REFERER_URL}\n' \
               f'Version: {config.SIWE_VERSION}\n' \
               f'Chain ID: {settings.CHAIN_ID}\n' \
               f'Nonce: {nonce}\n' \
               f'Issued At: {timestamp}'


    def sign_message(self, message: str):
        try:
            signed = self.account.sign_message(encode_defunct(text=message))
            return Web3.to_hex(signed.signature)
        except Exception as err:
            raise SequenceError(ErrorKind.SIGNATURE, str(err))
