import os

import uvicorn

if __name__ == "__main__":
    # Hosting platforms (Railway/Render) inject PORT; default to 8000 locally.
    port_str = os.getenv("PORT")
    if port_str:
        port = int(port_str)
        print(f"PORT detected: {port}")
    else:
        port = 8000
        print("No PORT detected, defaulting to 8000")

    uvicorn.run("humanizer.main:app", host="0.0.0.0", port=port, log_level="info")
