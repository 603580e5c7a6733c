# created: 12/07/2025
# last updated: 10/19/2026
# local dev server for the material search api

import os

from material_proxy import create_app

app = create_app()


if __name__ == "__main__":
    # Dev server on http://localhost:5000
    port = int(os.environ.get("PORT", "5000"))
    app.run(host="0.0.0.0", port=port, debug=True)
