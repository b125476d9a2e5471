
SHOW_DASHBOARD      = True                  # True - живой дашборд в терминале | False - обычный вывод логов
ASK_MODE            = True                  # спрашивать режим запуска при старте

PRIVATEKEYS_FILE    = 'privatekeys.txt'     # приватники без `0x`, по одному на строку
PROXIES_FILE        = 'proxies.txt'         # ip:port или ip:port:log:pass, по одному на строку
LOG_FILE            = 'logs/gpu_quest.log'  # файл логов, ротация по 5 MB

API_BASE_URL        = 'https://quest-api.gpu.net/api'
ORIGIN_URL          = 'https://token.gpu.net'
REFERER_URL         = 'https://token.gpu.net/'
CHAIN_ID            = 4048

REQUEST_TIMEOUT     = 45                    # таймаут одного запроса в секундах

DELAYS              = {                     # задержки в секундах
    'after_nonce'       : 0.5,              # после получения nonce
    'after_sign'        : 0.5,              # после подписи сообщения
    'after_login'       : 1,                # после логина
    'after_exp'         : 0.5,              # после получения EXP
    'after_tasks'       : 1,                # после получения списка тасков
    'between_tasks'     : 5,                # после каждого таска
    'between_wallets'   : 10,               # между кошельками
}

CLIENT_IDENTIFIER   = 'chrome_120'
USER_AGENT          = 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
