# sysprobe

sysprobe is a small HTTP service that reports information about the host it
runs on: CPUs, memory, disks, network interfaces, and the node and its
operating system. Every report is returned as JSON.

## Installation

```
pip install sysprobe
```

## Running the server

```
sysprobe
```

This starts the server on all interfaces, port 8080. Use `--port` or `-p` to
choose another port:

```
sysprobe --port 9000
sysprobe -p 9000
```

`--v=<level>` sets the logging level. A level of 1 or more turns on debug
logging; otherwise messages are logged at info level. A value that is not an
integer is reported and ignored.

```
sysprobe --v=5
```

To log the version (`v1.0`) and exit without starting the server:

```
sysprobe version
```

If the command line cannot be parsed, the error is logged and the command
exits with status 1.

## Endpoints

| Method | Path       | Returns                                                    |
|--------|------------|------------------------------------------------------------|
| GET    | `/version` | `{"status": "normal", "version": "v1.0"}`                  |
| POST   | `/test`    | an empty 200 response; the request is only logged          |
| GET    | `/help`    | a short list of the endpoints as HTML markup (text/plain)  |
| GET    | `/all`     | every report below in one JSON object                      |
| GET    | `/cpu`     | one entry per logical CPU: model, cores, MHz, cache, flags, usage percent |
| GET    | `/memory`  | total, available, used, free and cached memory in MiB, and used percent |
| GET    | `/disk`    | usage of each partition whose usage can be read, in MiB    |
| GET    | `/network` | each interface with its IPv4 and IPv6 addresses in prefix notation |
| GET    | `/node`    | hostname, OS, platform, platform version, kernel version, architecture |

`/all` returns an object with the keys `node info`, `cpu info`, `mem info`,
`disk info` and `network info`. A list report with no entries is returned as
`null`.

CPU usage is measured over a three-second interval, so `/cpu` and `/all`
answer more slowly than the other endpoints.

## Using it from Python

The collectors in `sysprobe.collect` return records from `sysprobe.models`;
each record's `to_dict()` gives its JSON form:

```python
from sysprobe.collect import get_memory_info, get_node_info

print(get_memory_info().to_dict())
print(get_node_info().to_dict())
```

The other collectors are `get_cpu_info()`, `get_disk_info()` and
`get_network_info()`, each returning a list of records.

`sysprobe.app.create_app()` returns the Flask application, so it can be served
by any WSGI server.

## Database back end

`sysprobe.databases.new_database("mongodb")` returns a `MongoDatabase`; any
other name gives `None`. Its `connect(config)` method takes a
`sysprobe.models.ServiceConfig`, opens a MongoDB client and pings the server,
raising `sysprobe.databases.DatabaseConnectionError` if either step fails.

`sysprobe.databases.connection_uri(config)` returns the URI `connect` uses.
When `config.database.conn_path` is set, the URI is assembled from the user
name, password, host, port, base name and auth source in the config; when it
is empty, the empty path is returned as is.

## What it does not do

sysprobe does not read a configuration file, and the HTTP server does not
connect to or store anything in a database. The database back end exists only
as the library API described above.