# API Route Constants

# Base API
API_BASE = '/api'

# Seating area routes (scoped by restaurant)
RESTAURANT_BASE = f'{API_BASE}/restaurant'
SEATING_AREA_BASE = f'{RESTAURANT_BASE}/{{restaurant_id}}/seating-area'

# Health
HEALTH = '/health'
