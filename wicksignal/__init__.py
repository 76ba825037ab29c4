"""
WickSignal
==========
Bot de señales direccionales basado en la forma de las velas, más un
cliente de cotizaciones en streaming sobre el protocolo de frames de
TradingView.
"""

__version__ = "0.3.0"
