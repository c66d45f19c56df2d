"""
form_entry.py
Typical form entry program: ask four questions, tidy up the answers and print a sentence.
"""

from typing import Callable, Dict


QUESTIONS = [
    ("first_name", "What's your first name?"),
    ("last_name", "What's your last name?"),
    ("city", "What city are you from?"),
    ("state", "What state or province are you from?"),
]


def capitalize(value: str) -> str:
    # returns a new string, the answer itself is left alone
    return value.strip().capitalize()

def upcase(value: str) -> str:
    return value.strip().upper()


def tidy_answers(answers: Dict[str, str]) -> Dict[str, str]:
    return {
        "first_name": capitalize(answers["first_name"]),
        "last_name": capitalize(answers["last_name"]),
        "city": capitalize(answers["city"]),
        "state": upcase(answers["state"]),
    }

def compose_sentence(first_name: str, last_name: str, city: str, state: str) -> str:
    return f"Your name is {first_name} {last_name} and you're from {city}, {state}!"


def run_form(ask: Callable[[str], str] = input) -> str:
    """Ask every question through `ask`, print the composed sentence and return it.
       Empty or non-alphabetic answers are taken as they are."""
    answers = {key: ask(prompt) for key, prompt in QUESTIONS}
    sentence = compose_sentence(**tidy_answers(answers))
    print(sentence)
    return sentence


if __name__ == "__main__":
    run_form()
