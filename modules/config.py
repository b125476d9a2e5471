
ENDPOINTS = {
    "nonce": "/auth/eth/nonce",
    "login": "/auth/eth/verify",
    "exp": "/users/exp",
    "tasks": "/users/social/tasks",
    "verify_task": "/users/social/tasks/{task_id}/verify",
}

SIWE_STATEMENT = "Sign in with Ethereum to the app."
SIWE_VERSION = "1"

LEVEL_STYLES = {
    "INFO": "cyan",
    "WAIT": "yellow",
    "SUCCESS": "green",
    "WARN": "dark_orange",
    "ERROR": "bold red",
}

LEVEL_ICONS = {
    "INFO": "[•]",
    "WAIT": "[~]",
    "SUCCESS": "[+]",
    "WARN": "[!]",
    "ERROR": "[-]",
}

# loguru level names for bus levels, custom ones are registered in utils
LOGURU_LEVELS = {
    "INFO": "INFO",
    "WAIT": "WAIT",
    "SUCCESS": "SUCCESS",
    "WARN": "WARNING",
    "ERROR": "ERROR",
}

BANNER = "GPU Network Quest Bot"
