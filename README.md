# atomhabits

Atom is a habit tracking application. This package serves a small JSON HTTP
API for habits. The habits are kept in a `habit` table behind a PostgREST
endpoint, such as a Supabase project.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Configuration

The server reads two settings from the environment. Before it reads them, it
looks for a `.env` file in the working directory or one of its parent
directories and loads that file if it finds one:

| Variable       | Meaning                                     |
|----------------|---------------------------------------------|
| `SUPABASE_URL` | Base URL of the PostgREST endpoint          |
| `SUPABASE_KEY` | API key sent in the `apikey` request header |

A `.env` file might look like this:

```
SUPABASE_URL=http://localhost:54321/rest/v1
SUPABASE_KEY=placeholder
```

If either variable is missing, the server does not start. It prints an
`Error: INFRASTRUCTURE_ERROR: DOTENV_ERROR: ...` line to standard error that
names the missing variable, and it exits with status 1.

## Running

```
atomhabits
```

By default the server listens on `0.0.0.0:3000`. Use `--host` and `--port` to
listen on another address:

```
atomhabits --host 127.0.0.1 --port 8000
```

## Endpoints

| Method | Path              | Action                                         |
|--------|-------------------|------------------------------------------------|
| GET    | `/`               | Returns `Hello, World!` as plain text          |
| GET    | `/api/habit`      | Lists every habit as a JSON array              |
| POST   | `/api/habit`      | Creates a habit from a JSON body, returns it   |
| GET    | `/api/habit/{id}` | Reads one habit                                |
| PUT    | `/api/habit/{id}` | Updates a habit from a JSON body, returns it   |
| DELETE | `/api/habit/{id}` | Deletes a habit and answers 200 with no body   |

A habit is a JSON object of the form `{"id": "<uuid>"}`.

When a request fails, the response body is a plain-text description of the
error:

- 400 `Invalid parameters` when the `{id}` in the path is not a UUID, or when
  the request body is not a valid habit object.
- 500 for every failure that comes from the database layer. This includes a
  habit that does not exist, because PostgREST then answers with an error
  object, and connection problems and replies that cannot be decoded.

## Using it from Python

You can build the application yourself, for example to serve it with your own
server setup:

```python
from atomhabits.app import create_app
from atomhabits.database import client

app = create_app(client())
```

- `atomhabits.database.client()` reads the configuration described above. It
  returns a `Postgrest` client that sends the `apikey` header and uses the
  `public` schema. `Postgrest.table(name)` returns a `QueryBuilder`, which has
  the methods `select`, `eq`, `single`, `insert`, `update`, `delete` and the
  awaitable `execute`.
- `atomhabits.services.HabitService` implements the asynchronous
  `atomhabits.crud.Crud` interface for the `habit` table. That interface is
  `read_all`, `read`, `create`, `update`, `delete` and `exists`.
- `atomhabits.routes.HabitRoutes` binds the HTTP handlers to any `Crud`
  service. Its `routes()` method returns the Starlette routes listed above.
- `atomhabits.models` defines the `Habit` and `PostgrestResponse` records.
  `atomhabits.errors` defines the error hierarchy: `InfrastructureError`,
  `DomainError`, `ApiError` and their subclasses.

## What it does not do

The package keeps no data of its own. It needs a reachable PostgREST endpoint
with a `habit` table that has an `id` column. It has no user accounts and no
authentication of incoming requests. A habit holds only its identifier.