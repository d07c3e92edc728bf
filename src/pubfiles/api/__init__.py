# pubfiles web layer
# Created: 2026-10-19
#
# HTML pages for /download/... and /files/..., plus a JSON API at /api/v1/.
