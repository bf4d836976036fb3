DESCRIPTION = "Support tickets and contacts in HubSpot CRM."

# Mapeos ilustrativos; dependen de la configuración de cada portal
PIPELINE_NAMES = {"0": "Support Pipeline"}
STAGE_NAMES = {"1": "New", "2": "Waiting on customer", "3": "Waiting on us", "4": "Closed"}
