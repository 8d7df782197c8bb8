# hireboard

A small terminal job board. Hirers register with a name, age, e-mail
address and password, log in with the e-mail address and password, and
then list applicants who have a given skill. Applicants (hirees)
register with their name, age, gender, phone number and skill, receive
a generated unique ID, and later log in with name, ID and phone number
to see their details.

Records are kept as whitespace-separated lines in two text files, by
default `hiree.txt` for applicants and `hirer.txt` for hirers in the
current directory. Every field must be a single word.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Using the board

Start the interactive program:

    hireboard

Options:

- `--hirees PATH` – applicants file (default `hiree.txt`)
- `--hirers PATH` – hirers file (default `hirer.txt`)

Answers are read as whitespace-separated words from standard input.
You are first asked whether you are a hirer (1) or a hiree (2), then
whether to register (1) or log in (2). Applicants must answer `Y` to
agreeing to work in Bengaluru before they can register. The skill menu
offers 1 Driving, 2 Cooking, 3 Construction, 4 Cleaning, 5 Beautician,
or 6 to type a skill of your own.

After logging in, a hirer can show their account details (1) or pick a
skill (2) and get the name, age, gender and contact number of every
applicant with exactly that skill. An applicant who logs in can choose
to display their stored details.

The command exits with status 1 if input runs out, if a number is
expected and something else is typed, or if a stored record is
malformed.

## Searching applicants by name

    hireboard-search [NAME] [--file PATH]

If `NAME` is not given it is asked for. The applicants file (default
`hiree.txt`) is read record by record in file order; each record is
printed until the first one with that name, after which `True` is
printed. Finally the number of records read and the byte offset reached
in the file are reported.

## Library use

The record handling lives in `hireboard.records`:

```python
from hireboard.records import filter_by_skill, find_hirer, read_hirees, read_hirers

for hiree in filter_by_skill(read_hirees("hiree.txt"), "Driving"):
    print(hiree.to_line(), end="")

hirer = find_hirer(read_hirers("hirer.txt"), "owner@example.com", "password")
```

- `Hiree` (name, age, gender, uid, skill, phone) and `Hirer` (name,
  age, email, password) are dataclasses; `to_line()` gives the line
  stored in the file and raises `RecordError` if a text field is empty
  or contains whitespace.
- `parse_hirees(text)` / `parse_hirers(text)` read records from text,
  one record per line break; `read_hirees(path)` / `read_hirers(path)`
  do the same for a file. Incomplete or non-numeric records raise
  `RecordError`.
- `append_hiree(path, hiree)` / `append_hirer(path, hirer)` add one
  record to a file.
- `generate_id(rng=None)` returns an applicant ID from 9999 to 11109
  inclusive, optionally from a given `random.Random`.
- `skill_for_choice(choice, custom=None)` maps a menu number 1–6 to a
  skill; 6 returns `custom`. Anything else raises `ValueError`.
- `filter_by_skill(hirees, skill)` keeps applicants with exactly that
  skill; `find_hiree(hirees, name, uid, phone)` and
  `find_hirer(hirers, email, password)` return the first match or
  `None`.

`hireboard.search.search_by_name(path, name)` returns a `SearchResult`
with the `records` read, whether the name was `found`, the byte
`position` reached and the number of `lines` read.

`hireboard.cli.Session(hiree_path, hirer_path, stdin, stdout, rng)`
drives the interactive menus over any text streams; its `run()`,
`hirer_menu()`, `hiree_menu()`, `register_hiree()`, `register_hirer()`,
`login_hirer()` and `login_hiree()` methods are the individual steps.

## What it does not do

Records can only be added and read: there is no way to change or
delete an applicant or hirer once stored. Hirer passwords are kept in
plain text in the hirers file, and nothing stops two registrations
from sharing an e-mail address or an applicant ID.