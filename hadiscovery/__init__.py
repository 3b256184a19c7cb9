"""Home Assistant MQTT discovery entities (switch, lock, scene, sensors, select) and the config serializer behind them."""

__version__ = "0.1.0"