# wholesale/core/email_templates.py
from decimal import Decimal


def welcome(name: str) -> str:
    return f"""
    <div style="font-family: Arial, sans-serif; color: #333;">
      <h2>Welcome to SoleTrade!</h2>
      <p>Hi {name},</p>
      <p>Thank you for registering with SoleTrade. Your account has been successfully created.</p>
      <p>You can now browse our catalog and submit inquiries.</p>
      <p>The SoleTrade Team</p>
    </div>
    """


def order_confirmation(name: str, order_no: str, amount: Decimal) -> str:
    return f"""
    <div style="font-family: Arial, sans-serif; color: #333;">
      <h2>Order Confirmation</h2>
      <p>Dear {name},</p>
      <p>We have received your order <strong>{order_no}</strong>.</p>
      <p>Total Amount: <strong>${amount:.2f}</strong></p>
      <p>We will process it shortly and notify you of any updates.</p>
      <p>The SoleTrade Team</p>
    </div>
    """
