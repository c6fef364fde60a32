# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKBOARD_APP_NAME": "App display name (default: taskboard).",
    "TASKBOARD_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKBOARD_DATA_DIR": "Local data directory for taskboard.log (default: .local/taskboard).",
    # Console
    "TASKBOARD_CONSOLE_ENABLED": "Run the console REPL (true/false, default: true).",
    "TASKBOARD_CONFIRM_DELETE": "Require '/delete <id> yes' (true/false, default: true).",
    # Board
    "TASKBOARD_SEED_DEMO": "Start from the demo board instead of empty columns (default: true).",
    # Timer
    "TASKBOARD_TICK_INTERVAL_SECONDS": "Countdown tick period in seconds (default: 1.0).",
}
