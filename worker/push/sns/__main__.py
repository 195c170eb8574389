import asyncio
import json
import sys

from common.logger.logger import get_logger
from worker.push.sns.adapter import SNSPushAdapter
from worker.push.sns.config import load_config

logger = get_logger(__name__)


async def run(job: dict) -> list:
    config = load_config()
    adapter = SNSPushAdapter(
        access_key=config.push_adapter.access_key,
        secret_key=config.push_adapter.secret_key,
        region=config.push_adapter.region,
        push_types=config.push_adapter.push_types,
    )
    results = await adapter.send(
        notification=job['notification'],
        installations=job.get('installations', []),
    )
    return [result.to_dict() for result in results]


if __name__ == '__main__':
    job = json.load(sys.stdin)
    logger.debug(f'job for {len(job.get("installations", []))} installations')
    json.dump(asyncio.run(run(job)), sys.stdout)
