# API Route Constants

# Base API
API_BASE = '/api'

# Auth routes
AUTH_BASE = f'{API_BASE}/auth'
AUTH_SIGNUP = f'{AUTH_BASE}/signup'
AUTH_LOGIN = f'{AUTH_BASE}/login'
AUTH_LOGOUT = f'{AUTH_BASE}/logout'
AUTH_PROFILE = f'{AUTH_BASE}/profile'

# Event routes
EVENT_BASE = f'{API_BASE}/events'
EVENT_CREATE = EVENT_BASE
EVENT_PUBLISHED = f'{EVENT_BASE}/published'
EVENT_MINE = f'{EVENT_BASE}/user'
EVENT_GET = f'{EVENT_BASE}/{{event_id}}'
EVENT_UPDATE = f'{EVENT_BASE}/{{event_id}}'
EVENT_DELETE = f'{EVENT_BASE}/{{event_id}}'
EVENT_TICKETS = f'{EVENT_BASE}/{{event_id}}/tickets'

# Ticket routes
TICKET_BASE = f'{API_BASE}/tickets'
TICKET_BOOK = TICKET_BASE
TICKET_MINE = f'{TICKET_BASE}/user'
TICKET_CANCEL = f'{TICKET_BASE}/{{ticket_id}}'
TICKET_QRCODE = f'{TICKET_BASE}/{{ticket_id}}/qrcode'
TICKET_PDF = f'{TICKET_BASE}/{{ticket_id}}/pdf'
TICKET_CHECK_IN = f'{TICKET_BASE}/{{ticket_id}}/check-in'

# Admin routes
ADMIN_BASE = f'{API_BASE}/admin'
ADMIN_USERS = f'{ADMIN_BASE}/users'
ADMIN_EVENTS = f'{ADMIN_BASE}/events'
