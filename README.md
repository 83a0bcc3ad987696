# dotplan

dotplan is a library of building blocks for bringing a machine to a
described state: small idempotent units of change ("atoms"), steps that
decide whether an atom runs, facts about the machine and the user
("contexts"), and the discovery, templating and parsing of YAML and TOML
manifests.

Install with `pip install .`; add the `test` extra (`pip install .[test]`)
and run `pytest` for the test suite.

## Atoms

Every atom derives from `dotplan.atoms.base.Atom`. `plan()` returns an
`Outcome` whose `should_run` says whether the atom has work to do, and
`execute()` does it. Atoms also offer `output_string()`, `error_message()`
and `status_code()`, which default to `""`, `""` and `0`.

| Atom | What it does |
| --- | --- |
| `dotplan.atoms.base.Echo(message)` | Always runs, does nothing; its output is the message. |
| `dotplan.atoms.command.Exec(command, arguments, working_dir, environment, privileged)` | Runs a command and keeps its stdout and stderr. With `privileged=True` and a user other than root, the command is run through `sudo` after `sudo --validate`. `new_run_command(command)` makes a plain one. |
| `dotplan.atoms.directory.Create(path)` | Creates a directory and its parents if the path does not exist. |
| `dotplan.atoms.file.create.Create(path)` | Creates an empty file if the path does not exist. |
| `dotplan.atoms.file.contents.SetContents(path, contents)` | Writes the given bytes when the file differs or is missing. |
| `dotplan.atoms.file.chmod.Chmod(path, mode)` | Sets permission bits, e.g. `0o644` (POSIX only; elsewhere it never runs). |
| `dotplan.atoms.file.chown.Chown(path, owner, group)` | Plans whether owner or group differ from those requested (POSIX only). Its `execute()` does not change ownership. |
| `dotplan.atoms.file.copy.Copy(from_, to)` | Copies contents and permission bits onto an existing file when they differ; refuses a target that is not a file. |
| `dotplan.atoms.file.link.Link(source, target)` | Makes `target` a symbolic link to `source`; never replaces an existing non-link. |
| `dotplan.atoms.http.Download(url, to)` | Downloads a URL to a file that does not exist yet. |
| `dotplan.atoms.git.Clone(repository, directory, reference)` | Runs `git clone` into a directory that does not exist yet. |

```python
from dotplan.atoms.directory import Create

atom = Create(path="/tmp/projects")
if atom.plan().should_run:
    atom.execute()
```

## Steps

`dotplan.steps.step.Step(atom, initializers, finalizers)` wraps an atom.

- Initializers (`dotplan.steps.initializers`) are `Ensure(...)` or
  `SkipIf(...)` around a check such as `CommandFound("git")` or
  `FileExists(path)`. `do_initializers_allow_us_to_run()` consults them
  in order; the last one decides, and a check that raises counts as "no".
- Finalizers (`dotplan.steps.finalizers`) are `StopIf(...)` around a check
  such as `OutputContains("text")`. `do_finalizers_allow_us_to_continue()`
  works the same way against the step's atom.

## Configuration

`dotplan.config.load_config()` reads `Comtrya.yaml` from the current
directory, else from the user configuration directory, and returns a
`Config`:

```yaml
manifest_paths:
  - ./manifests
  - https://example.com/dotfiles.git#main:manifests
variables:
  ship_name: Daedalus
include_variables:
  - file+yaml:///home/user/vars.yaml
  - file+toml:///home/user/vars.toml
  - dns+txt://vars.example.com
disable_update_check: false
```

Without a file, `manifest_paths` is `["."]`. A file that names no manifest
paths makes its own directory the manifest path. An unreadable or invalid
file raises `ConfigError`. `Config.from_dict(data)` builds a configuration
from a mapping.

## Contexts

`dotplan.contexts.build.build_contexts(config)` collects values under five
prefixes:

- `user`: `id`, `name`, `username`, `home_dir`, `config_dir`, `data_dir`,
  `data_local_dir`, `document_dir`
- `os`: `hostname`, `family`, `name`, `distribution`, `codename`,
  `bitness`, `version`, `edition`
- `env`: every environment variable
- `variables`: the configuration's `variables`
- `include_variables`: top-level keys from `file+yaml`, `file+toml` and
  `dns+txt` includes (TXT records of the form `key=value`). File values are
  kept in their TOML text form, so strings appear with their quotes.

A provider that fails contributes an empty set of values. Values are
`dotplan.values.Value` objects (null, string, number or list);
`to_template_context(contexts)` turns them into plain Python data.

## Manifests

- `dotplan.manifests.model.resolve(location)` turns a location into a local
  directory: git URLs (`https://`, `git://`, `ssh://`, optionally with
  `#branch`, `#branch:path` or `#:path`) are cloned or pulled into the
  user cache directory with the `git` program; anything else is treated as
  a local path. Failure raises `ManifestProviderError`.
- `dotplan.manifests.load.load(directory, contexts)` walks the directory
  (up to 9 levels, skipping hidden entries, entries matched by `.ignore`
  files and, inside a git work tree, `.gitignore` files, and anything in a
  `files` directory), renders each `.yaml`, `.yml` or `.toml` file as a
  Jinja template against the contexts, parses it, and returns a dict of
  `Manifest` objects by name. Files that fail to render or parse are logged
  and skipped.
- `get_manifest_name(directory, path)` names a manifest by its path:
  `tools/main.yaml` becomes `tools`, `tools/git.yaml` becomes `tools.git`.

```python
from dotplan.config import load_config
from dotplan.contexts.build import build_contexts
from dotplan.manifests.model import resolve
from dotplan.manifests.load import load

config = load_config()
contexts = build_contexts(config)

for location in config.manifest_paths:
    directory = resolve(location)
    for name, manifest in load(directory, contexts).items():
        print(name, manifest.depends)
```

Templates may call `read_file_contents(path=...)`, which returns a file's
contents stripped of surrounding whitespace:

```python
from dotplan.templating import render_string

render_string('{{ read_file_contents(path="/etc/hostname") }}', {})
```

## What dotplan does not do

- There is no command-line program; everything is used as a library.
- A manifest's `actions` are kept as the parsed data they are; nothing turns
  them into atoms or runs them, and `depends` is not used to order
  manifests.
- `Chown` only reports whether ownership differs; it does not change it.