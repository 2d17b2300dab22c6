import os

LOG_LEVEL_ENV_VAR = "NAMED_INVOKER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = os.environ.get(LOG_LEVEL_ENV_VAR, "ERROR")

ENV_CTX_VARS = [
    "invoker_user",
    "invoker_project",
]
