"""
AWS Lambda handler for the contact form endpoint (API Gateway proxy).

Thin HTTP layer that delegates to SubmissionProcessor and maps its result
to a status code:
- accepted            -> 202
- validation_error    -> 400
- server_error        -> 500
"""

import logging
from typing import Dict, Any

from domain.models import RawSubmission, SubmitStatus
from domain.submission_processor import SubmissionProcessor
from integrations.sns_publisher import SnsPublisher
from services import config as config_service
from services import responses

# Load configuration once per container (raises ConfigurationError on bad env)
app_config = config_service.load_config()

# Configure logging
logger = logging.getLogger()
logger.setLevel(app_config.log_level)

# Add console handler for local testing (AWS Lambda provides handlers automatically)
if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setLevel(app_config.log_level)
    formatter = logging.Formatter('%(levelname)s - %(name)s - %(message)s')
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

logger.info(
    f"Configuration loaded: environment={app_config.environment}, "
    f"topic_arn={app_config.topic_arn}, allowed_origin={app_config.allowed_origin}"
)

# Initialize publisher and processor once at module level (reused across invocations)
publisher = SnsPublisher(topic_arn=app_config.topic_arn, region=app_config.region)
submission_processor = SubmissionProcessor(publisher)

ACCEPTED_MESSAGE = "Inquiry accepted. It will be processed asynchronously."
SERVER_ERROR_MESSAGE = "A system error occurred. Please try again later."
INVALID_BODY_MESSAGE = "request body must be a JSON object"

STATUS_CODES = {
    SubmitStatus.ACCEPTED: 202,
    SubmitStatus.VALIDATION_FAILURE: 400,
    SubmitStatus.DELIVERY_FAILURE: 500,
}


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Handle a contact form request.

    Expected request body:
    {
        "name": "Sender name",
        "email": "sender@example.com",
        "message": "At least ten characters of inquiry text"
    }

    Args:
        event: API Gateway proxy event
        context: Lambda context

    Returns:
        API Gateway proxy response
    """
    origin = app_config.allowed_origin
    request_id = getattr(context, 'aws_request_id', None) or getattr(context, 'request_id', 'UNKNOWN')

    try:
        method = responses.request_method(event)
        logger.info(f"Contact request: method={method}, request_id={request_id}, environment={app_config.environment}")

        # CORS preflight
        if method == 'OPTIONS':
            return responses.build_response(200, None, origin)

        if method != 'POST':
            logger.warning(f"Rejected {method} request")
            return responses.build_response(405, {
                'status': 'method_not_allowed',
                'message': f"method {method or 'UNKNOWN'} is not allowed"
            }, origin)

        try:
            body = responses.parse_json_body(event)
        except responses.InvalidBodyError as e:
            logger.info(f"Invalid request body: {e}")
            return responses.build_response(400, {
                'status': 'validation_error',
                'message': INVALID_BODY_MESSAGE
            }, origin)

        result = submission_processor.submit(RawSubmission.from_mapping(body))

    except Exception as e:
        logger.error(f"Unhandled error processing contact request {request_id}: {e}", exc_info=True)
        return responses.build_response(500, {
            'status': 'server_error',
            'message': SERVER_ERROR_MESSAGE
        }, origin)

    status_code = STATUS_CODES[result.status]

    if result.status is SubmitStatus.ACCEPTED:
        logger.info(f"✓ Accepted contact request {request_id} (message_id={result.message_id})")
        body = {'status': result.status.value, 'message': ACCEPTED_MESSAGE}
    elif result.status is SubmitStatus.VALIDATION_FAILURE:
        body = {'status': result.status.value, 'message': result.error_message}
    else:
        logger.warning(f"⚠ Contact request {request_id} failed: {result}")
        body = {'status': result.status.value, 'message': SERVER_ERROR_MESSAGE}

    return responses.build_response(status_code, body, origin)


def health_check(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Simple health check endpoint for monitoring.
    """
    return responses.build_response(200, {
        'status': 'healthy',
        'environment': app_config.environment,
        'topicConfigured': bool(app_config.topic_arn)
    }, app_config.allowed_origin)
