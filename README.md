# morsebridge

Converts text to Morse code and back. The alphabet is Cyrillic, plus the
digits and the usual punctuation. You can use the package as a library or run
it as a small web service. The service takes an uploaded file and detects
which way to convert it.

## Installation

```
pip install morsebridge
```

## Library use

```python
from morsebridge.morse import to_morse, to_text

to_morse("Привет")              # ".--. .-. .. .-- . -"
to_text(".--. .-. .. .-- . -")  # "ПРИВЕТ"
```

`to_morse` and `to_text` use a default converter. In that converter,
characters are separated by one space and words by three spaces. Lowercase
letters are upper-cased before lookup. Characters and codes with no encoding
are dropped.

`rune_to_morse(char)` and `morse_to_rune(code)` look up a single character or
code in the default alphabet, `DEFAULT_MORSE`. Each returns an empty string
when there is no match.

### Custom converters

To use other separators, a custom alphabet, or a different way of handling
unknown characters, build your own `Converter`:

```python
from morsebridge.morse import Converter, NoEncodingError

def mark_unknown(error: NoEncodingError) -> str:
    return "?"

converter = Converter(
    {"A": ".-", "B": "-..."},
    char_separator="/",
    handler=mark_unknown,
)
converter.to_morse("AB")   # ".-/-..."
```

`Converter` takes these keyword options:

* `char_separator` (default `" "`)
* `word_separator` (empty by default). When empty, it is built from the
  character separator and the alphabet's code for `" "`, or a plain space if
  the alphabet has none.
* `convert_to_upper` (default `False`)
* `trailing_separator` (default `False`)
* `handler` (default `ignore_handler`)

Passing `None` as the alphabet raises `ValueError`.

The handler receives a `NoEncodingError`, whose `text` attribute holds the
unknown character or code. It returns the text to insert in place of that
character. `ignore_handler` returns nothing, so unknown characters are
dropped.

### Automatic direction

```python
from morsebridge.service import Service, is_morse

service = Service()
service.convert("ПРИВЕТ")               # ".--. .-. .. .-- . -"
service.convert(".--. .-. .. .-- . -")  # "ПРИВЕТ"
is_morse("... --- ...")                 # True
```

Input counts as Morse when, after leading and trailing whitespace is removed,
it holds only dots, dashes and spaces, with at least one dot or dash.

## Web service

Start the server:

```
morsebridge
```

It takes these options:

* `--addr`: the listen address. The default is `:8080`, which means every
  interface on port 8080.
* `--index`: the path of the index page. The default is `index.html`.
* `--output-dir`: the directory where converted results are written. The
  default is `.`.

It logs to standard output.

The server routes requests as follows:

* `/upload`
  * Only `POST` is allowed.
  * The request must be a `multipart/form-data` form with a file field named
    `myFile`.
  * The server converts the file's contents with `Service.convert` and returns
    the result as plain text.
  * It also writes the result to the output directory. The file is named
    after the current UTC time, with colons replaced by underscores, and keeps
    the uploaded file's extension.
  * A request that is not multipart, or that has no `myFile` field, gets a
    500 response.
* Every other path
  * Only `GET` is allowed.
  * The server returns the index page, or 404 if the file is missing.

Any other method on either route gets `405 Method Not Allowed`.

For example:

```
curl -F "myFile=@message.txt" http://localhost:8080/upload
```

### Using the server from Python

`morsebridge.server.Server` is a WSGI application, so you can also mount it
in a WSGI server of your own:

```python
import logging
from morsebridge.handlers import Handlers
from morsebridge.server import Server
from morsebridge.service import Service

app = Server(logging.getLogger("app"), Handlers(Service()), ":8080")
```

* `Server.run()` listens and serves until `Server.close()` is called.
* Once `run()` has bound its socket, `bound_port` holds the port it listens
  on.

## Limitations

The package does not ship an index page. Provide your own HTML file, for
example an upload form that posts `myFile` to `/upload`, and point `--index`
at it. It does not cap the size of uploads.