# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    "TASKLIST_LOG_TO_FILE": "Write <data_dir>/tasklist.log (true/false, default: true).",
    # Console
    "TASKLIST_PAUSE": "Wait for ENTER after each command (true/false, default: true).",
    # Paths
    "TASKLIST_DATA_DIR": "Local data directory for logs (default: .local/tasklist).",
    "TASKLIST_TASKS_PATH": "Tasks file (default: tasks.csv in the working directory).",
}
