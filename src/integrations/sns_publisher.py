"""
Amazon SNS Publisher

Publishes validated contact submissions to an SNS topic as JSON so that
downstream subscribers (SQS queues, email notifiers, ...) can process them
asynchronously.

Usage:
    from integrations.sns_publisher import SnsPublisher

    publisher = SnsPublisher(topic_arn="arn:aws:sns:us-west-2:123456789012:contact")
    message_id = publisher.publish(submission)
"""

import logging
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from domain.models import Submission
from domain.publisher import DeliveryError, Publisher
from services.config import DEFAULT_REGION, ConfigurationError

logger = logging.getLogger(__name__)

EVENT_TYPE = 'contact.inquiry.submitted'


def _initialize_sns_client(region: str = DEFAULT_REGION):
    """
    Initialize boto3 SNS client with timeout configuration.

    Returns:
        boto3.client: Configured SNS client
    """
    # Single attempt with strict timeouts; a slow publish is a failed publish
    client_config = Config(
        retries={
            'max_attempts': 1,  # 1 attempt total (no retries)
            'mode': 'standard'
        },
        connect_timeout=5,  # 5 seconds to establish connection
        read_timeout=10     # 10 seconds max for the publish response
    )

    client = boto3.client('sns', region_name=region, config=client_config)

    logger.info(
        f"SNS client initialized: region={region}, "
        f"connect_timeout=5s, read_timeout=10s, max_attempts=1"
    )
    return client


class SnsPublisher(Publisher):
    """
    Publisher backed by an Amazon SNS topic.

    One instance (and one boto3 client) is created at cold start and shared
    by every invocation of the warm container.
    """

    def __init__(self, topic_arn: str, client=None, region: str = DEFAULT_REGION):
        """
        Args:
            topic_arn: ARN of the destination topic
            client: Optional pre-built SNS client (tests, custom config)
            region: AWS region used when client is not provided

        Raises:
            ConfigurationError: If topic_arn is empty
        """
        if not topic_arn:
            raise ConfigurationError("SNS topic ARN is required")

        self.topic_arn = topic_arn
        self.client = client if client is not None else _initialize_sns_client(region)

    def publish(self, submission: Submission) -> str:
        """
        Publish a submission to the topic as a JSON message.

        Args:
            submission: Validated contact submission

        Returns:
            str: SNS MessageId

        Raises:
            DeliveryError: If SNS rejects the message, times out, or
                returns no MessageId
        """
        payload = submission.to_json()

        try:
            response = self.client.publish(
                TopicArn=self.topic_arn,
                Message=payload,
                MessageAttributes={
                    'event_type': {
                        'DataType': 'String',
                        'StringValue': EVENT_TYPE
                    }
                }
            )
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', 'Unknown')
            error_message = e.response.get('Error', {}).get('Message', str(e))

            logger.error(
                f"Failed to publish to SNS: topic_arn={self.topic_arn}, "
                f"error_code={error_code}, error_message={error_message}"
            )
            raise DeliveryError(
                f"SNS publish failed ({error_code}): {error_message}"
            ) from e
        except BotoCoreError as e:
            # Connection errors and timeouts
            logger.error(f"SNS publish did not complete: topic_arn={self.topic_arn}, error={e}")
            raise DeliveryError(f"SNS publish did not complete: {e}") from e

        message_id: Optional[str] = response.get('MessageId')
        if not message_id:
            logger.error(f"SNS publish returned no MessageId: topic_arn={self.topic_arn}")
            raise DeliveryError("SNS publish returned no MessageId")

        logger.info(
            f"Message {message_id} published to topic {self.topic_arn} "
            f"(payload_size={len(payload)} chars)"
        )
        return message_id
