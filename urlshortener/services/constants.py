# Log event names attached to records via `extra={'event': ...}`
SHORT_URL_CREATED = 'SHORT_URL_CREATED'
SHORT_URL_REUSED = 'SHORT_URL_REUSED'
SHORTCODE_COLLISION = 'SHORTCODE_COLLISION'
SHORT_URL_RESOLVED = 'SHORT_URL_RESOLVED'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
INVALID_URL = 'INVALID_URL'
SHORTCODE_SPACE_EXHAUSTED = 'SHORTCODE_SPACE_EXHAUSTED'
