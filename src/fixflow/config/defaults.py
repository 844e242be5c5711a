"""
fixflow.config.defaults - Default configuration values
"""

DEFAULT_CONFIG = {
    "storage": {
        "dir": "~/.fixflow",
        "key": "troubleshootingData",
    },
    "flow": {
        "start": "start",
        "solution_prefix": "Solution: ",
    },
    "editor": {
        # Empty means $VISUAL, then $EDITOR, then vi
        "command": "",
    },
    "server": {
        "host": "127.0.0.1",
        "port": 5055,
    },
}
