# copyrat

`copyrat` reads text from standard input, highlights every span that matches
one of its patterns (URLs, file paths, SHAs, dates, IP addresses, quoted
strings, ...) and shows a one- or two-letter *hint* on each span. Type a hint
and the matching text is printed to standard output, ready to be piped
somewhere else.

The interactive screen is drawn on `/dev/tty`, so it works while standard
input and output are redirected; it needs a POSIX terminal.

## Installation

```console
pip install .
```

## Usage

```console
git log | copyrat -r --unique-hint -s bold -x sha -x datetime -x quoted-backtick
```

Once the spans are displayed:

- type a hint to select its span; a key that starts no hint ends the session
  with nothing selected,
- `n` / `N`, or the arrow keys, move the focus between spans (with `-r`,
  `n` and `N` move in the opposite direction),
- `y` or Enter selects the focused span,
- `Esc` leaves without selecting anything.

`Y`, typing a hint in capitals, and the space bar (which toggles between
"clipboard" and "tmux buffer") only change the `uppercased` and
`output_destination` fields of the returned `Selection`; the `copyrat`
command prints the selected text the same way in every case.

When nothing was selected, or no span matched, `copyrat` exits with status 1.

## Options

| option | meaning |
| --- | --- |
| `-k`, `--alphabet` | alphabet the hints are drawn from (default `dvorak`) |
| `-A`, `--all-patterns` | use every built-in pattern |
| `-x`, `--pattern-name` | use one named pattern; may be repeated |
| `-X`, `--custom-patterns` | add a regular expression with a capture group; may be repeated |
| `-r`, `--reverse` | assign hints starting from the bottom |
| `-u`, `--unique-hint` | give identical spans the same hint |
| `-w`, `--focus-wrap-around` | wrap focus from the last span to the first and back |
| `--hint-alignment` | `leading` (default) or `trailing` |
| `-s`, `--hint-style` | `bold`, `italic`, `underline` or `surround` |
| `--hint-surroundings` | two characters used by the `surround` style (default `{}`) |
| `--text-fg`, `--text-bg`, `--span-fg`, `--span-bg`, `--focused-fg`, `--focused-bg`, `--hint-fg`, `--hint-bg` | colors: `black`, `red`, `green`, `yellow`, `blue`, `magenta`, `cyan`, `white`, their `bright-` variants (also written without the dash), or `none` |

Custom patterns win over named ones when both match at the same place. A
custom pattern without a capture group, or one that does not compile, raises
`ValueError`.

### Alphabets

`qwerty`, `azerty`, `qwertz`, `dvorak` and `colemak`, each also available with
a `-homerow`, `-left-hand` or `-right-hand` suffix. The letters `n` and `y`
are always left out, since they are used for navigation and selection. When an
alphabet is too small for the number of spans, hints are drawn from a longer
built-in alphabet instead.

### Named patterns

`markdown-url`, `url`, `email`, `diff-a`, `diff-b`, `docker`, `path`,
`hexcolor`, `uuid`, `version`, `ipfs`, `sha`, `ipv4`, `ipv6`,
`pointer-address`, `datetime`, `quoted-single`, `quoted-double`,
`quoted-backtick`, `digits`, `command-line-args`, `nix-shas`, `nix-log`.

ANSI color sequences in the input are recognised and never hinted.

## Using it from Python

Finding spans and their hints does not need a terminal:

```python
from copyrat.alphabet import parse_alphabet
from copyrat.model import Model
from copyrat.regexes import parse_pattern_name

model = Model.build(
    ["see https://example.com/docs"],
    parse_alphabet("qwerty"),
    False,                        # use_all_patterns
    [parse_pattern_name("url")],  # named_patterns
    [],                           # custom_patterns
    False,                        # reverse
    False,                        # unique_hint
)
for span in model.spans:
    print(span.hint, span.text)
```

`copyrat.cli.run(lines, config)` does the same and then opens the
interactive screen, returning a `Selection` or `None`; `config` comes from
`copyrat.config.parse_config(argv)`.

The rendering helpers in `copyrat.render` write escape sequences to any text
stream, and `copyrat.controller.ViewController.listen` accepts any iterable of
keys (see `copyrat.controller.read_keys`), so the interface can be driven
without a terminal.

## Tmux helpers

`copyrat.tmux` parses the output of `tmux list-panes` (`parse_panes`,
`Pane.parse`) and `tmux show-options -g` (`parse_options`), and builds the
argument list for `tmux capture-pane` (`Pane.capture_args`).
`copyrat.config.parse_config_ext` parses the tmux-related options
(`--ignore-tmux-options`, `--window-name`, `--capture-region`,
`--clipboard-exe`) together with the options above, and
`ConfigExt.apply_tmux_options` merges `@copyrat-*` options on top.

## What it does not do

The package never runs tmux or any other program. There is no tmux command:
it does not capture a pane, swap panes, set a tmux buffer, send keys, or pipe
the selection to a clipboard program. The helpers above only parse text and
build arguments; running them is left to the caller.