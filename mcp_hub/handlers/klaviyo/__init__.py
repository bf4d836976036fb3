DESCRIPTION = "Profiles and abandoned carts tracked in Klaviyo."
