"""Loan Decision Engine.

Decides loan eligibility, the approvable amount and the approvable period
from a personal identity code and a requested loan.
"""

__version__ = "1.0.0"
