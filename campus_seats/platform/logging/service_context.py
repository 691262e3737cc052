import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    """`{service}@{env}:{pid}` tag attached to every log line."""
    service_name = os.getenv('SERVICE_NAME', 'campus-seats')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    return f'{service_name}@{deploy_env}:{os.getpid()}'
