from payreport.db.repos.payment_account_repo import PaymentAccountRepo

__all__ = ["PaymentAccountRepo"]
