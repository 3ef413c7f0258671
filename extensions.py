"""
Flask extensions instantiated without app binding.

These are initialized later in app.py with init_app().
"""
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Rate Limiter (will be configured with app)
limiter = Limiter(key_func=get_remote_address)
