"""Constants shared across the Tomcat manager client."""

OK_PREFIX = "OK - "

# Tomcat always answers the text interface in UTF-8, whatever the query charset.
MANAGER_CHARSET = "UTF-8"

DEFAULT_CHARSET = "ISO-8859-1"
DEFAULT_USERNAME = "admin"
DEFAULT_CHUNK_SIZE = 4096

OCTET_STREAM = "application/octet-stream"

AUTHENTICATION_FAILED_MESSAGE = "The username and password you provided are not correct (error 401)"
AUTHORIZATION_FAILED_MESSAGE = (
    "The username you provided is not allowed to use the text-based Tomcat Manager (error 403)"
)
