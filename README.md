# delivery

The groundwork for a delivery service. It has four modules:

- `delivery.errors`: `DomainError` and the errors built on it: `ObjectNotFoundError`, `ValueIsInvalidError`, `ValueIsOutOfRangeError`, `ValueIsRequiredError` and `VersionIsInvalidError`. Each takes a parameter name and an optional `cause`. When a cause is given, the error's text ends with `(cause: ...)` and the cause is chained as `__cause__`.
- `delivery.location`: `Location` is an immutable point on the map. Both coordinates must be whole numbers from 1 to 10. `distance_to` returns the Manhattan distance between two locations.
- `delivery.config`: `Config` is a frozen dataclass of settings. `Config.from_env` loads it from a `.env` file. `CompositionRoot` holds the loaded `Config`.
- `delivery.app`: an HTTP server that answers `GET /health` with `Healthy`. It also provides `make_server` and the `main` entry point.

## Installation

```
pip install .
```

To run the tests, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Running the server

Create a `.env` file in the working directory:

```
HTTP_PORT=8080
DB_HOST=localhost
DB_PORT=5432
DB_USER=user
DB_PASSWORD=password
DB_NAME=delivery
DB_SSLMODE=disable
GEO_SERVICE_GRPC_HOST=localhost:5004
KAFKA_HOST=localhost:9092
KAFKA_CONSUMER_GROUP=delivery
KAFKA_BASKET_CONFIRMED_TOPIC=basket.confirmed
KAFKA_ORDER_CHANGED_TOPIC=order.changed
```

Then start the server:

```
delivery
```

How settings are resolved:

- A variable set in the process environment overrides the value in `.env`.
- A setting found in neither place is an empty string.

The server listens on `0.0.0.0` at `HTTP_PORT` and runs until you interrupt it. The `delivery` command logs an error and exits with status 1 in these cases:

- `.env` is missing or cannot be read.
- `HTTP_PORT` is not a number.
- The port cannot be bound.

Check that it is running:

```
curl http://localhost:8080/health
Healthy
```

Any other path gets a `404` with the body `{"message":"Not Found"}`.

You can also build the server in code with `make_server(root, port, host="0.0.0.0")`. It returns a `ThreadingHTTPServer` that is not yet serving.

## Using locations

```python
from delivery.location import Location
from delivery.errors import ValueIsOutOfRangeError

a = Location(2, 6)
b = Location(4, 9)
print(a.distance_to(b))   # 5

try:
    Location(0, 4)
except ValueIsOutOfRangeError as exc:
    print(exc)

print(Location.random().is_empty())  # False
```

Other parts of the `Location` API:

- `Location.empty()` returns a location with no position set.
- Measuring a distance to or from an empty location raises `ValueIsInvalidError`.
- A coordinate that is not an `int` raises `TypeError`.
- Locations compare by value and can be hashed.
- The coordinates are available as the `x` and `y` properties.

## What this package does not do

`Config` has fields for a database, a geo service and Kafka, but nothing in the package connects to any of them. `CompositionRoot` only holds the configuration. The package has no storage, no message consumers or producers, and no delivery endpoints. The HTTP server offers only the health check.