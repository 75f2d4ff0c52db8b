# reloadtext

A small text filter. It reads a `.txt` file, corrects it line by line and
writes the result to another `.txt` file.

## What it corrects

Each line goes through these steps, in this order:

1. **Case tags**: `(up)`, `(low)` and `(cap)` change the word before the tag.
   With a count, as in `(up, 3)`, they change that many words before it. The
   tag is removed. A tag with no letter or digit before it is removed and does
   nothing else. For example, `it was the age of foolishness (cap, 2)` becomes
   `it was the age Of Foolishness`.
2. **Number tags**: `1E (hex)` becomes `30` and `10 (bin)` becomes `2`. If the
   word before a tag is not a valid number in that base, the word stays as it
   is. Any `(bin)` or `(hex)` tag that is left over is removed.
3. **Punctuation and quotes**: `.`, `,`, `!`, `?`, `:` and `;` are joined to
   the word before them. When a letter, digit or `-` follows one of these
   marks, a space is put between them. Runs of whitespace become one space.
   Single and double quotes are placed tight around the text they enclose, so
   `' awesome '` becomes `'awesome'`. Apostrophes in contractions such as
   `don't`, `I'm` or `you're` stay as they are.
4. **Articles**: `a` becomes `an` before a vowel or a silent `h` (as in
   `hour` or `honor`), and `an` becomes `a` before anything else. For example,
   `a amazing rock` becomes `an amazing rock`. The article is left alone when
   the next word is another article or one of `for`, `and`, `or`, `yet`,
   `with`, `so` and `but`. The article keeps its capitalisation. This step
   also rejoins the words of the line with single spaces.

## Installation

```
pip install .
```

## Command line

```
reloadtext sample.txt result.txt
```

The output file name is optional and defaults to `result.txt`. Both files must
end in `.txt`, and they must not be the same path. If the arguments are wrong,
or a file cannot be read or written, the command prints a message and exits
with status 1.

## Library use

```python
from reloadtext.cli import process_text, run

print(process_text("There is no greater agony than bearing a untold story inside you."))
# There is no greater agony than bearing an untold story inside you.

run("sample.txt", "result.txt")
```

`reloadtext.cli.process_line` corrects a single line. `reloadtext.cli.run`
raises `reloadtext.cli.UsageError` when the file names are not acceptable.

Each step can also be used on its own:

- `reloadtext.transform.process_case_tags`
- `reloadtext.numbers.replace_numbers`
- `reloadtext.punctuation.process_punctuation_and_quotes`, `format_punctuation`, `fix_quotes`
- `reloadtext.articles.fix_articles`

`reloadtext.numbers.add_space` is also available. It puts a space before `(`
and after `)` where one is missing. The command line does not use it.

## Running the tests

```
pip install .[test]
pytest
```