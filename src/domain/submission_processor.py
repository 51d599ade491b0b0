"""
Contact submission pipeline - core business logic.

This module coordinates a single contact form submission:
1. Validate raw input into a Submission
2. Publish the Submission through the injected Publisher
3. Return the outcome as a SubmitResult

Validation failures are returned with their reason unchanged.
Delivery failures (and anything unexpected) are logged with full detail and
returned as a generic DELIVERY_FAILURE. No exceptions propagate out of submit().
"""

import logging
import time

from .models import RawSubmission, Submission, SubmitResult, ValidationError
from .publisher import DeliveryError, Publisher

logger = logging.getLogger(__name__)


class SubmissionProcessor:
    """
    Handles the validate-then-publish flow for contact submissions.

    The publisher is constructed once per process and passed in, so the
    processor holds no transport state of its own.
    """

    def __init__(self, publisher: Publisher):
        self.publisher = publisher

    def submit(self, raw: RawSubmission) -> SubmitResult:
        """
        Validate and publish a single contact submission.

        Args:
            raw: Untrusted form input

        Returns:
            SubmitResult: accepted, validation_failure(reason) or delivery_failure()
        """
        try:
            submission = Submission.create(raw)
        except ValidationError as e:
            # Client error, not a system fault
            logger.info(f"Submission rejected: {e.reason}")
            return SubmitResult.validation_failure(e.reason)
        except Exception as e:
            logger.error(f"Unexpected error while validating submission: {e}", exc_info=True)
            return SubmitResult.delivery_failure()

        start_time = time.time()
        try:
            message_id = self.publisher.publish(submission)
        except DeliveryError as e:
            logger.error(f"Failed to deliver submission: {e}", exc_info=True)
            return SubmitResult.delivery_failure()
        except Exception as e:
            logger.error(f"Unexpected error while delivering submission: {e}", exc_info=True)
            return SubmitResult.delivery_failure()

        publish_time = time.time() - start_time
        logger.info(f"Submission accepted: message_id={message_id}, publish_time={publish_time:.3f}s")

        return SubmitResult.accepted(message_id)
