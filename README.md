# hadiscovery

Describe entities to Home Assistant over MQTT discovery, publish their
state and react to the commands Home Assistant sends back.

No dependencies beyond the standard library.

## The context

Every entity is given an `hadiscovery.serializer.MqttContext`. It is a
dataclass holding:

- `device_id` – the ID of your device (required for any topic to be built),
- `discovery_prefix` – defaults to `"homeassistant"`,
- `data_prefix` – defaults to `"aha"`,
- `shared_availability` – when true, entities point at the device-wide
  `availability_topic` instead of their own,
- `device_serializer` – an optional `Serializer` whose output is embedded
  under `"dev"` in each entity's config,
- `connected` – when false, `publish` and `subscribe` return `False`.

Topics are built as:

- config: `[discovery prefix]/[component]/[device ID]/[unique ID]/config`
- data: `[data prefix]/[device ID]/[unique ID]/[topic]`

(`config_topic`, `data_topic` and `compare_data_topics` in
`hadiscovery.serializer` build and check them.)

By default `publish(topic, payload, retain)` and `subscribe(topic)` only
record what they are given in `published` (a list of `Message` objects
with `topic`, `payload` and `retain`) and `subscriptions`. To talk to a
real broker, subclass `MqttContext` and override these two methods to
hand the data to your MQTT client.

## Entities

| Module                 | Classes                                  |
|------------------------|------------------------------------------|
| `hadiscovery.switch`   | `Switch`                                 |
| `hadiscovery.lock`     | `Lock`, `LockState`, `LockCommand`       |
| `hadiscovery.scene`    | `Scene`                                  |
| `hadiscovery.sensor`   | `Sensor`, `SensorNumber`                 |
| `hadiscovery.select`   | `Select`                                 |

Each entity is created with a unique ID (unique within your device) and
the context. Settings such as `name`, `icon`, `retain`, `optimistic`,
`device_class` are plain attributes; set them before the config is first
published. Setting `availability` to `True` or `False` makes the entity
report `online`/`offline`; leaving it `None` omits availability.

When your client connects, call `on_mqtt_connected()`: the entity
publishes its discovery config (retained), its availability, its last
known state (unless `retain` is set) and subscribes to its command
topic. Pass every incoming message to `on_mqtt_message(topic, payload)`;
the payload may be `str` or bytes.

## Example

```python
from hadiscovery.serializer import MqttContext
from hadiscovery.switch import Switch

context = MqttContext(device_id="board1")
switch = Switch("kitchen_light", context)

def handle(state, sender):
    # report the new state back, otherwise the panel keeps the old one
    sender.set_state(state)

switch.on_command(handle)
switch.on_mqtt_connected()

# context.published now holds:
#   homeassistant/switch/board1/kitchen_light/config
#     {"uniq_id":"kitchen_light","stat_t":"aha/board1/kitchen_light/stat_t","cmd_t":"aha/board1/kitchen_light/cmd_t"}
#   aha/board1/kitchen_light/stat_t  OFF
# context.subscriptions == ["aha/board1/kitchen_light/cmd_t"]

switch.on_mqtt_message("aha/board1/kitchen_light/cmd_t", b"ON")
```

`set_state(state, force)` publishes only when the value changes unless
`force` is true, and returns whether the state is known to Home
Assistant afterwards; `turn_on()` and `turn_off()` are shortcuts.

### Locks

`Lock.set_state` takes a `LockState` (`LOCKED`, `UNLOCKED`; `UNKNOWN` is
never published). The command callback receives a `LockCommand`
(`LOCK`, `UNLOCK`, `OPEN`).

### Scenes

`Scene.on_command(callback)` registers a callback called with the scene
itself whenever it is activated.

### Sensors

`Sensor.set_value(text)` publishes every time it is called. `SensorNumber`
works with fixed-point values from `hadiscovery.numeric`: a `Numeric`
holds an integer base value and a `Precision` (number of decimal places,
`P0`–`P3`). Plain ints and floats are converted with the sensor's
precision; a `Numeric` of a different precision is rejected.

```python
from hadiscovery.numeric import Numeric, Precision
from hadiscovery.sensor import SensorNumber

temperature = SensorNumber("temperature", context, Precision.P1)
temperature.unit_of_measurement = "°C"
temperature.set_value(21.5)          # publishes "21.5"

Numeric.from_base(1234, 1).to_str()  # "123.4"
```

### Selects

```python
from hadiscovery.select import Select

select = Select("fan_speed", context)
select.set_options("Low;Medium;High")
select.on_command(lambda index, sender: sender.set_state(index))
```

Options are given once, separated by semicolons; the state is the index
of the chosen option (`-1` until one is set). A select without options
publishes no config.

## Building your own entity

Subclass `hadiscovery.serializer.Entity` and override
`build_serializer()`, `on_mqtt_connected()` and `on_mqtt_message()`.
The `Serializer` collects properties (`set`, with a `ValueType` of
`STRING`, `BOOL`, `NUMBER` or `ARRAY`), flags (`set_flag` with
`Flag.WITH_DEVICE` or `Flag.WITH_AVAILABILITY`) and data topics (`topic`)
and renders the compact discovery JSON with `serialize()`.
`SerializerArray` from `hadiscovery.serializer_array` holds the strings
of an array property.

## What the package does not do

- It opens no network connections and contains no MQTT client; the
  context only records messages unless you override its methods.
- It has no entity for a number adjusted from the panel (a slider or
  input box); only read-only numeric sensors are provided.