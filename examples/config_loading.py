"""config_loading.py"""

from arbor.config import loader

app = loader("arbor.yaml")

if __name__ == "__main__":
    app.execute()
