from pydantic import BaseModel, Field

DESCRIPTION = "Customers, invoices and billing data from Stripe."


class StripeConnection(BaseModel):
    token: str = Field(..., min_length=1, description="Stripe secret key")
