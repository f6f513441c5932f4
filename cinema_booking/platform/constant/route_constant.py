# API Route Constants

# Base API
API_BASE = '/api'

# Booking routes
BOOKING_BASE = f'{API_BASE}/booking'
BOOKING_RESERVE = f'{BOOKING_BASE}/reserve'
BOOKING_SHOWING_SEATS = f'{BOOKING_BASE}/seats/{{show_id}}'
BOOKING_GET = f'{BOOKING_BASE}/{{booking_id}}'
BOOKING_USER_HISTORY = f'{BOOKING_BASE}/user/{{user_id}}'

# System routes
HEALTH = '/health'
METRICS = '/metrics'
