from __future__ import annotations

import logging

from utils.logger import _MaskingFilter, _mask, logger


def test_mask_hides_iban_body() -> None:
    assert _mask("Paid to DE89370400440532013000.") == "Paid to DE89**************3000."
    assert _mask("no iban here") == "no iban here"


def test_filter_masks_message_arguments() -> None:
    record = logging.LogRecord(
        "euTestData", logging.INFO, __file__, 1, "checked %s", ("GB82WEST12345698765432",), None
    )
    assert _MaskingFilter().filter(record)
    assert record.getMessage() == "checked GB82**************5432"


def test_shared_logger_is_configured_once() -> None:
    assert logger.name == "euTestData"
    assert logger.handlers
    assert logging.getLogger("euTestData") is logger
