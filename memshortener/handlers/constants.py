# Log events / error codes reported by the HTTP handlers
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
INVALID_JSON_BODY = 'INVALID_JSON_BODY'
MISSING_URL = 'MISSING_URL'
SHORTCODE_GENERATION_FAILED = 'SHORTCODE_GENERATION_FAILED'

REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
MISSING_SHORTCODE = 'MISSING_SHORTCODE'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'

# Key of the injected short URL DAO in Flask's app.extensions
SHORT_URL_DAO_EXTENSION = 'memshortener.short_url_dao'
