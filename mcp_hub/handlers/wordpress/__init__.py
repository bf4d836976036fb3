DESCRIPTION = "Posts and pages from a WordPress site via the wp/v2 REST API."
