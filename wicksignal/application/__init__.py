"""
WickSignal – Application Layer
================================
Casos de uso y puertos. Orquesta el dominio sin conocer
el transporte concreto (websockets, httpx).
"""
