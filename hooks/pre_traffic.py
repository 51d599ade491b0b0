import json
import boto3
import os
import logging

logger = logging.getLogger()
logger.setLevel(logging.INFO)

codedeploy = boto3.client('codedeploy')
lambda_client = boto3.client('lambda')

# Fails validation on purpose so nothing is published during the smoke test
INVALID_SUBMISSION_EVENT = {
    'httpMethod': 'POST',
    'headers': {'Content-Type': 'application/json'},
    'body': json.dumps({'name': '', 'email': 'smoke-test@example.com', 'message': 'pre-traffic'}),
    'isBase64Encoded': False
}

PREFLIGHT_EVENT = {
    'httpMethod': 'OPTIONS',
    'headers': {'Origin': 'https://example.com'}
}


def _invoke(target_function, test_event):
    response = lambda_client.invoke(
        FunctionName=target_function,
        InvocationType='RequestResponse',
        Payload=json.dumps(test_event)
    )

    response_payload = json.loads(response['Payload'].read())
    logger.info(f"Test response: {json.dumps(response_payload)}")

    if response.get('FunctionError'):
        raise Exception(f"Function returned error: {response_payload}")

    if response.get('StatusCode') != 200:
        raise Exception(f"Unexpected status code: {response.get('StatusCode')}")

    return response_payload


def _report_status(deployment_id, hook_execution_id, status):
    codedeploy.put_lifecycle_event_hook_execution_status(
        deploymentId=deployment_id,
        lifecycleEventHookExecutionId=hook_execution_id,
        status=status
    )


def lambda_handler(event, context):
    """
    Pre-traffic hook for CodeDeploy.
    Runs smoke tests against the new contact handler version before shifting traffic.
    """
    logger.info(f"Pre-traffic hook triggered: {json.dumps(event)}")

    deployment_id = event['DeploymentId']
    lifecycle_event_hook_execution_id = event['LifecycleEventHookExecutionId']
    target_function = os.environ.get('TARGET_FUNCTION')

    try:
        logger.info(f"Running smoke tests on {target_function}")

        # Test 1: invalid submission must be rejected by validation
        payload = _invoke(target_function, INVALID_SUBMISSION_EVENT)
        body = json.loads(payload.get('body') or '{}')
        if payload.get('statusCode') != 400 or body.get('status') != 'validation_error':
            raise Exception(f"Invalid submission not rejected: {payload.get('statusCode')} {body}")

        # Test 2: CORS preflight
        payload = _invoke(target_function, PREFLIGHT_EVENT)
        if payload.get('statusCode') != 200:
            raise Exception(f"Invalid preflight status: {payload.get('statusCode')}")
        if 'Access-Control-Allow-Origin' not in payload.get('headers', {}):
            raise Exception("Preflight response is missing CORS headers")

        logger.info(f"Smoke tests passed on {target_function}")
        _report_status(deployment_id, lifecycle_event_hook_execution_id, 'Succeeded')
        return {'statusCode': 200, 'body': json.dumps('Contact handler smoke tests succeeded')}

    except Exception as e:
        logger.error(f"Smoke tests failed on {target_function}: {e}", exc_info=True)
        # 'Failed' makes CodeDeploy roll back before any traffic shifts
        _report_status(deployment_id, lifecycle_event_hook_execution_id, 'Failed')
        return {'statusCode': 500, 'body': json.dumps(f'Contact handler smoke tests failed: {e}')}
