"""
Logging configuration for the double auction.

This module provides logging setup with console and rotating file
handlers, a structured logger for market events, and a separate
audit trail for executed trades.
"""

import logging
import logging.handlers
import os
import sys
from typing import Optional


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    max_file_size: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5
) -> None:
    """
    Set up logging configuration for the market.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (optional)
        max_file_size: Maximum log file size in bytes
        backup_count: Number of backup files to keep
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    simple_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(simple_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        _ensure_parent_dir(log_file)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_file_size,
            backupCount=backup_count
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging initialized - Level: {level}, File: {log_file or 'Console only'}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def _ensure_parent_dir(path: str) -> None:
    log_dir = os.path.dirname(path)
    if log_dir and not os.path.exists(log_dir):
        os.makedirs(log_dir)


class MarketLogger:
    """
    Structured logger for market operations.

    Records are pipe-delimited so they can be grepped or split easily.
    """

    def __init__(self, name: str = "double_auction"):
        self.logger = logging.getLogger(name)
        self.order_logger = logging.getLogger(f"{name}.orders")
        self.trade_logger = logging.getLogger(f"{name}.trades")

    def log_order_submission(self, side: str, account_id: str, price: int, amount: int) -> None:
        """Log order submission."""
        self.order_logger.info(
            f"ORDER_SUBMIT|{side}|{account_id}|{price}|{amount}"
        )

    def log_trade_execution(self, buyer: str, bid: int, seller: str, ask: int, filled: int) -> None:
        """Log trade execution."""
        self.trade_logger.info(
            f"TRADE_EXEC|{buyer}|{bid}|{seller}|{ask}|{filled}"
        )

    def log_system_event(self, event: str, details: str = "") -> None:
        """Log system event."""
        self.logger.info(f"SYSTEM_EVENT|{event}|{details}")

    def log_error(self, component: str, error: str, account_id: str = None) -> None:
        """Log error."""
        context = f"|{account_id}" if account_id else ""
        self.logger.error(f"ERROR|{component}|{error}{context}")


def create_audit_logger(log_file: str = "logs/audit.log") -> logging.Logger:
    """
    Create a dedicated audit logger for executed trades.

    Args:
        log_file: Path to audit log file

    Returns:
        Audit logger instance
    """
    _ensure_parent_dir(log_file)

    audit_logger = logging.getLogger("audit")
    audit_logger.setLevel(logging.INFO)
    for handler in audit_logger.handlers:
        handler.close()
    audit_logger.handlers.clear()

    # Audit records stay out of the console output
    audit_logger.propagate = False

    audit_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=50 * 1024 * 1024,  # 50MB
        backupCount=10
    )

    audit_formatter = logging.Formatter(
        '%(asctime)s|%(levelname)s|%(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    audit_handler.setFormatter(audit_formatter)

    audit_logger.addHandler(audit_handler)

    return audit_logger


def log_trade_audit(audit_logger: logging.Logger, trade_data: dict) -> None:
    """
    Log trade execution to audit trail.

    Args:
        audit_logger: Audit logger instance
        trade_data: Trade data dictionary, as produced by Trade.to_dict()
    """
    buyer = trade_data.get("buyer", {})
    seller = trade_data.get("seller", {})
    audit_logger.info(
        f"TRADE_EXECUTE|"
        f"BUYER:{buyer.get('debit', {}).get('account_id', 'N/A')}|"
        f"BUYER_DEBIT:{buyer.get('debit', {}).get('amount', 'N/A')}|"
        f"BUYER_CREDIT:{buyer.get('credit', {}).get('amount', 'N/A')}|"
        f"SELLER:{seller.get('debit', {}).get('account_id', 'N/A')}|"
        f"SELLER_DEBIT:{seller.get('debit', {}).get('amount', 'N/A')}|"
        f"SELLER_CREDIT:{seller.get('credit', {}).get('amount', 'N/A')}"
    )
