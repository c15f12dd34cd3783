"""Chart session wiring poller, renderer and surface."""
