"""
WickSignal – Infrastructure Layer
===================================
Adaptadores concretos de los puertos: websockets, httpx, logging.
"""
