DESCRIPTION = "Customer lookups against the configured Shopify store."
