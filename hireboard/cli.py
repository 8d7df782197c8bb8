"""Interactive menu for applicants and employers."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Iterator, Optional, Sequence, TextIO, Union

from hireboard.records import (
    CUSTOM_SKILL_CHOICE,
    SKILLS,
    Hiree,
    Hirer,
    RecordError,
    append_hiree,
    append_hirer,
    filter_by_skill,
    find_hiree,
    find_hirer,
    generate_id,
    read_hirees,
    read_hirers,
    skill_for_choice,
)

PathLike = Union[str, Path]

_SKILL_MENU = "\t".join(
    [f"{n}.{skill}" for n, skill in enumerate(SKILLS, start=1)]
    + [f"{CUSTOM_SKILL_CHOICE}.Enter your own skill set"]
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class Session:
    """One interactive run reading whitespace-separated answers from ``stdin``."""

    def __init__(
        self,
        hiree_path: PathLike = "hiree.txt",
        hirer_path: PathLike = "hirer.txt",
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.hiree_path = Path(hiree_path)
        self.hirer_path = Path(hirer_path)
        self._answers = _tokens(stdin if stdin is not None else sys.stdin)
        self.out = stdout if stdout is not None else sys.stdout
        self.rng = rng

    def _say(self, *parts: str, end: str = "\n") -> None:
        print(*parts, end=end, file=self.out)

    def _word(self) -> str:
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError("no more input") from None

    def _choice(self) -> Optional[int]:
        word = self._word()
        try:
            return int(word)
        except ValueError:
            return None

    def _number(self, field: str) -> int:
        word = self._word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"{field} must be a number, got {word!r}") from None

    def _skill(self) -> Optional[str]:
        choice = self._choice()
        custom = self._word() if choice == CUSTOM_SKILL_CHOICE else None
        try:
            return skill_for_choice(choice if choice is not None else 0, custom)
        except ValueError:
            self._say("Invalid choice")
            return None

    def run(self) -> None:
        """Show the opening menu and dispatch to the chosen role."""
        self._say("\t\t\t\t\t\t\t\tHi there, Welcome to Our Program.")
        self._say(
            "\t\t\t\t\tWe can provide a platform for both hiree and hirer "
            "with the help of our program\n\n"
        )
        self._say("Please select What you want to do in our program :")
        self._say("1 - If you are a Hirer\t\t2 - If you are Hiree")
        choice = self._choice()
        if choice == 1:
            self.hirer_menu()
        elif choice == 2:
            self.hiree_menu()
        else:
            self._say("Invalid choice, Please enter a valid option\n")

    def hirer_menu(self) -> None:
        self._say("\nSelect an option : 1) Register 2) Login")
        choice = self._choice()
        if choice == 1:
            self.register_hirer()
        elif choice == 2:
            self.login_hirer()
        else:
            self._say("\nInvalid Choice")

    def hiree_menu(self) -> None:
        self._say("\nSelect the options : 1) Register New user  2) Login with ID :\t", end="")
        choice = self._choice()
        if choice == 1:
            if self._accepts_workplace():
                self.register_hiree()
            else:
                self._say(
                    "There is no work apart from Bengaluru right now, We will expand our "
                    "work place soon, Please check again later !!\n"
                )
        elif choice == 2:
            self.login_hiree()
        else:
            self._say("\nEnter Valid choice please")

    def _accepts_workplace(self) -> bool:
        self._say("We only hire people who can work in Bengaluru. Type Y if you agree or else Type N")
        return self._word()[0] in "yY"

    def register_hiree(self) -> Optional[Hiree]:
        """Collect an applicant's details, store them and return the record."""
        self._say("\nEnter the details of applicant")
        self._say("\nEnter Your name : \t", end="")
        name = self._word()
        self._say("\nEnter Your age :\t", end="")
        age = self._number("age")
        self._say("\nEnter Your gender (M/F/O):\t", end="")
        gender = self._word()
        self._say("\nEnter your phone number :\t", end="")
        phone = self._number("phone number")
        uid = generate_id(self.rng)
        self._say("\nSelect your skill :")
        self._say(_SKILL_MENU)
        skill = self._skill()
        if skill is None:
            return None
        hiree = Hiree(name, age, gender, uid, skill, phone)
        self._say(
            f"\nName : {name}, Age : {age}, Gender : {gender}, ID : {uid}, "
            f"Skill : {skill}, Phone number : {phone}"
        )
        append_hiree(self.hiree_path, hiree)
        return hiree

    def register_hirer(self) -> Hirer:
        """Collect an employer's details, store them and return the record."""
        self._say("Enter the details :")
        self._say("Name :\t", end="")
        name = self._word()
        self._say("Age :\t", end="")
        age = self._number("age")
        self._say("Email :\t", end="")
        email = self._word()
        self._say("Password :\t", end="")
        secret = self._word()
        hirer = Hirer(name, age, email, secret)
        append_hirer(self.hirer_path, hirer)
        self._say("\nYou are successfully registered now, Thank you")
        return hirer

    def login_hirer(self) -> Optional[Hirer]:
        """Check an employer's credentials and open the employer menu."""
        try:
            hirers = read_hirers(self.hirer_path)
        except OSError:
            self._say("\nFile did not open")
            return None
        self._say("Enter Your Details to login :")
        self._say("Email :\t", end="")
        email = self._word()
        self._say("Password : ", end="")
        secret = self._word()
        hirer = find_hirer(hirers, email, secret)
        if hirer is None:
            self._say("\nWrong Credentials, Try again ")
            return None
        self._say("\nLogin Successfull\n")
        self._after_hirer_login(hirer)
        return hirer

    def _after_hirer_login(self, hirer: Hirer) -> None:
        self._say("What do you want to do after loging in :")
        self._say("1.Display Account info\t2. Hire Applicants :\t", end="")
        choice = self._choice()
        if choice == 1:
            self._say("Your Details are :")
            self._say(f"Name     :\t{hirer.name}")
            self._say(f"Age      :\t{hirer.age}")
            self._say(f"Email    :\t{hirer.email}")
        elif choice == 2:
            self._say("Select the skill on which you want to contact the hirer :)")
            self._say(f"\n{_SKILL_MENU}\t", end="")
            skill = self._skill()
            self._say("")
            if skill is not None:
                self._list_applicants(skill)

    def _list_applicants(self, skill: str) -> None:
        try:
            hirees = read_hirees(self.hiree_path)
        except OSError:
            self._say("\nFile did not open")
            return
        self._say(f"Here is the list of all the applicants with {skill} skill :\n")
        for hiree in filter_by_skill(hirees, skill):
            self._say(
                f"Name : {hiree.name}, Age : {hiree.age}, Gender : {hiree.gender}, "
                f"Contact Number : {hiree.phone}"
            )
        self._say(
            "\nYou can contact the applicant now using their number."
            "\nThank you for using our application :)\n"
        )

    def login_hiree(self) -> Optional[Hiree]:
        """Check an applicant's name, id and phone and show their details."""
        self._say("Enter the details to login -")
        self._say("Name      :\t", end="")
        name = self._word()
        self._say("Unique ID :\t", end="")
        uid = self._number("unique id")
        self._say("Phone no. :\t", end="")
        phone = self._number("phone number")
        try:
            hirees = read_hirees(self.hiree_path)
        except OSError:
            self._say("\nFile did not open")
            return None
        hiree = find_hiree(hirees, name, uid, phone)
        if hiree is None:
            self._say("\nInvalid Credentials, Try again")
        else:
            self._say("\nLogin Successfull\n")
            self._say("Select any one choice -\t1.Display My Details\t", end="")
            if self._choice() == 1:
                self._say(f"\nName\t   :\t{hiree.name}")
                self._say(f"Age\t   :\t{hiree.age}")
                self._say(f"Gender\t   :\t{hiree.gender}")
                self._say(f"Unique ID  :\t{hiree.uid}")
                self._say(f"Skill\t   :\t{hiree.skill}")
                self._say(f"Phone no   :\t{hiree.phone}")
        self._say("\nProgram Ending\n")
        return hiree


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Job board for applicants and employers.")
    parser.add_argument("--hirees", default="hiree.txt", help="applicants file")
    parser.add_argument("--hirers", default="hirer.txt", help="employers file")
    args = parser.parse_args(argv)
    session = Session(args.hirees, args.hirers, stdin=sys.stdin, stdout=sys.stdout)
    try:
        session.run()
    except EOFError:
        print("\nInput ended", file=sys.stderr)
        return 1
    except (ValueError, RecordError) as exc:
        print(f"\n{exc}", file=sys.stderr)
        return 1
    return 0