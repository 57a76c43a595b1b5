"""
Service context extraction for distributed logging.

Identifies the emitting process in both container and local environments.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'seating-area-service')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    metadata_uri = os.getenv('ECS_CONTAINER_METADATA_URI_V4', '')
    if metadata_uri:
        # URI looks like http://169.254.170.2/v4/{task_id}-{timestamp}
        try:
            task_id = metadata_uri.split('/')[-1].split('-')[0][:8]
        except IndexError:
            task_id = 'ecs'
    else:
        task_id = str(os.getpid())

    return f'{service_name}@{deploy_env}:{task_id}'
