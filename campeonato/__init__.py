"""
Campeonato API - in-memory tournament service

Responsibilities:
- Tournament store (CRUD, lock-guarded, process memory only)
- HTTP routing for /torneios and /torneios/<id>
- Change events published to Redis (optional)
- Health check
"""
