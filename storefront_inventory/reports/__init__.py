"""
Module reports.

Rapprochement mensuel du stock (solde d'ouverture, mouvements, solde de
clôture) et export CSV du rapport.
"""

from .service import reconcile, summarize_transactions
from .export import render_monthly_report_csv

__all__ = [
    'reconcile',
    'summarize_transactions',
    'render_monthly_report_csv',
]
