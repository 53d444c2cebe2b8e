from .health import health_bp
from .properties import properties_bp
from .booking import booking_bp
from .booking_flow import booking_flow_bp
from .payments import payments_bp
from .stripe_webhook import webhook_bp
