import asyncio
import json
import logging
from datetime import datetime, timezone

import config
from main import build_processor, run_processor

logger = logging.getLogger()


def lambda_handler(event, context):
    results = {
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'status': 'success',
        'results': {}
    }
    processor = None
    try:
        logger.setLevel(config.get_log_level())
        logger.info("Lambda invocation started")
        processor = build_processor(config.get_endpoints())
        summary = asyncio.run(run_processor(processor))
        results['results'] = summary.to_dict()
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        results['status'] = 'error'
        results['error'] = str(e) or type(e).__name__
        # Alerts and updates that went out before the failure stay committed
        if processor is not None:
            results['results'] = processor.summary.to_dict()
        return {'statusCode': 500, 'body': json.dumps(results)}
    return {'statusCode': 200, 'body': json.dumps(results)}
