# trading_dashboard/dashboard/components/account_panel.py
"""
Account Information card
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QFrame, QVBoxLayout, QLabel

from ...data.models import AccountData

logger = logging.getLogger(__name__)


def format_money(value: float) -> str:
    return f"${value:,.2f}"


def yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


class AccountPanel(QFrame):
    """Shows account fields, a loading message, or a no-data message"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.account: Optional[AccountData] = None
        self.init_ui()
        self.set_account(None)

    def init_ui(self):
        self.setObjectName("card")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(15, 15, 15, 15)

        title = QLabel("Account Information")
        title.setObjectName("section_title")
        layout.addWidget(title)

        self.body = QLabel()
        self.body.setWordWrap(True)
        layout.addWidget(self.body)
        layout.addStretch()

    def set_loading(self):
        self.body.setText("Loading account data...")

    def set_account(self, account: Optional[AccountData]):
        self.account = account
        if account is None:
            self.body.setText("No account data available")
            return

        rows = [
            ("Account ID", account.id),
            ("Account Number", account.account_number),
            ("Status", account.status),
            ("Currency", account.currency),
            ("Buying Power", format_money(account.buying_power)),
            ("Cash", format_money(account.cash)),
            ("Portfolio Value", format_money(account.portfolio_value)),
            ("Pattern Day Trader", yes_no(account.pattern_day_trader)),
            ("Trading Blocked", yes_no(account.trading_blocked)),
        ]
        self.body.setText("<br>".join(f"<b>{name}:</b> {value}" for name, value in rows))
