# lsimproved

`lsi` lists a directory as a tree, with a short description next to every
entry. It helps you find your way around directories that pile up, such as
experiment results buried several levels deep.

```
/home/user/experiments/
├── run_2024_01	/ baseline, lr=1e-3
├── run_2024_02	/ larger batch
│              	  diverged after epoch 12
└── notes.txt	/ File
```

The first line names the listed directory under its parent. Entries without
a description show `Dir` or `File`. Output is coloured with ANSI escape
sequences.

## Installing

```
pip install lsimproved
```

This installs the `lsi` command.

## Listing

```
lsi              # the current directory
lsi some/dir     # another directory
echo some/dir | lsi
```

A path piped on standard input takes the place of the `PATH` argument.

Options:

| option | effect |
|--------|--------|
| `-a`, `--all` | show hidden entries (names starting with a dot) |
| `-F`, `--only-files` | list only files |
| `-D`, `--only-directories` | list only directories |
| `-c FILE`, `--config FILE` | read colours from a TOML configuration file |
| `-n N`, `--desc-num N` | show at most `N` lines of each description |
| `-S MODE`, `--sort MODE` | `p` sorts by name (the default), `d` by description |
| `-s TEXT`, `--set-description TEXT` | set the description of `PATH` |
| `-e EDITOR`, `--edit-description EDITOR` | edit the description of `PATH` with `EDITOR` |

Directories always come before files. With `-S p` each group is sorted by
name; with `-S d` described entries come first within each group, ordered by
their description text, followed by undescribed entries ordered by name.
A value of `-n` that is not a non-negative whole number is ignored.

On failure `lsi` prints `Error: ...` to standard error and exits with
status 1.

## Writing descriptions

Set a description straight from the command line:

```
lsi some/dir -s "baseline run\nsecond line"
```

A literal `\n` starts a new line. Or open the description in an editor:

```
lsi some/dir -e vim
```

The editor replaces the running `lsi` process. Giving `-e` without an
editor name is an error.

A directory's description is kept in `<dir>/.description.lsi`. A file's
description is kept in `.file_description_lsi/.<name>.lsi` next to the file;
that folder is created when needed. Leading and trailing whitespace of a
description is dropped when it is read.

## Colours in descriptions

Inside a description these markers switch colour:

| marker | effect    |
|--------|-----------|
| `;r;`  | red       |
| `;g;`  | green     |
| `;y;`  | yellow    |
| `;b;`  | blue      |
| `;p;`  | purple    |
| `;c;`  | cyan      |
| `;w;`  | white     |
| `;_;`  | underline |
| `;e;`  | end       |

A literal `\033` is read as the escape character, so raw ANSI sequences work
as well.

## Configuration

Colours can be changed in a TOML file given with `-c`. Every key in the
`[colors]` table is a list of ANSI sequences written without the leading
escape character:

```toml
[colors]
dir = ["[34m", "[4m"]
description = ["[32m"]
```

The keys are `red`, `blue`, `green`, `white`, `purple`, `yellow`, `cyan`,
`underline`, `end`, `dir`, `current_dir`, `file` and `description`. Any key
left out keeps its default. A file that cannot be read or parsed, or a key
whose value is not a list of strings, leaves all colours at their defaults.

## Using it from Python

```python
from lsimproved.args import LsiArgs
from lsimproved import lsi, mkdiri

lsi.run(LsiArgs(path="."))
mkdiri.run(LsiArgs(path="results", set_description="baseline run"))
```

Lower-level pieces are available too: `lsimproved.fs.get_paths` collects and
sorts entries, `lsimproved.fs.write_description` stores a description,
`lsimproved.config.read_config` and `lsimproved.colors.build_colors` load
colours, and `lsimproved.view.format_line` renders a single tree line.
Errors are raised as subclasses of `lsimproved.errors.LsiError`.