"""Names and identifiers shared across the auth service."""

SERVICE_NAME = "lfx-v2-auth-service"

# User repository selection
USER_REPOSITORY_TYPE_ENV_KEY = "USER_REPOSITORY_TYPE"
USER_REPOSITORY_TYPE_MOCK = "mock"
USER_REPOSITORY_TYPE_AUTH0 = "auth0"

# Auth0 Management API configuration
AUTH0_TENANT_ENV_KEY = "AUTH0_TENANT"
AUTH0_DOMAIN_ENV_KEY = "AUTH0_DOMAIN"

# Auth0 M2M authentication configuration
AUTH0_CLIENT_ID_ENV_KEY = "AUTH0_CLIENT_ID"
AUTH0_PRIVATE_BASE64_KEY_ENV_KEY = "AUTH0_PRIVATE_BASE64_KEY"
AUTH0_AUDIENCE_ENV_KEY = "AUTH0_AUDIENCE"

# Messaging subjects and queue
AUTH_SERVICE_QUEUE = "lfx.auth-service.queue"
USER_EMAIL_TO_USER_SUBJECT = "lfx.auth-service.email_to_username"
USER_METADATA_UPDATE_SUBJECT = "lfx.auth-service.user_metadata.update"

# User lookup criteria
CRITERIA_TYPE_EMAIL = "email"
CRITERIA_TYPE_USERNAME = "username"