"""Tests for order observers."""

import logging
from decimal import Decimal

from pizzeria.services.notify import AuditLogger, EmailNotifier


def test_email_notifier(capsys):
    EmailNotifier().update(Decimal("108"))
    assert capsys.readouterr().out == "[Email] Sending order confirmation for Bs108...\n"


def test_audit_logger_prints_and_logs(capsys, caplog):
    with caplog.at_level(logging.INFO, logger="pizzeria.audit"):
        AuditLogger().update(Decimal("90"))
    assert capsys.readouterr().out == "[Log] Order recorded for Bs90.\n"
    assert "total=90" in caplog.text
