from flask import Blueprint

client_bp = Blueprint('client', __name__, url_prefix='/api/client')

from . import bookings, payments
