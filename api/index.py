# created: 12/07/2025
# last updated: 10/19/2026
# serverless entry point; the platform serves the WSGI `app`

from material_proxy import create_app

app = create_app()
