DESCRIPTION = "Scheduled meetings for Calendly invitees."
