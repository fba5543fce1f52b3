"""Banking domain package.

This package contains the bank account value object used to check
account details before they are handed to a payment processor.
"""
