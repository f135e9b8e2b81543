"""The Command Line Interface for the walkthrough, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that asks for whatever the command line
left out, step by step, printing each intermediate value and trace along the way.

Typical usage example:

    rsaviz keygen --p 19 --q 23 --e 17
    OR
    python -m rsaviz
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import pathlib
import sys
import typing

import rsaviz


def parse_codes(raw: str) -> list[int]:
    """Parses comma and/or whitespace separated integers."""
    return [int(part) for part in raw.replace(",", " ").split()]


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Callable = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in RSA Viz.",
            choices=["prime", "candidates", "keygen", "encode", "decode", "sign", "verify"],
        ),
    "prime":
        HelpData("Trial division primality check."),
    "candidates":
        HelpData("List valid public exponents for a prime pair."),
    "keygen":
        HelpData("Step-by-step key pair derivation."),
    "encode":
        HelpData("Encode a message with the public key."),
    "decode":
        HelpData("Decode a message with the private key."),
    "sign":
        HelpData("Encode a message with the private key."),
    "verify":
        HelpData("Decode a signed message with the public key."),
    "value":
        HelpData(description="The number to check for primality.", format=int),
    "p":
        HelpData(description="First prime, an integer greater than 2.", format=int),
    "q":
        HelpData(description="Second prime, an integer greater than 2 and different from p.", format=int),
    "e":
        HelpData(description="Public exponent, one of the valid candidates.", format=int),
    "public_key":
        HelpData(
            description="Location of the public key file.",
            format=pathlib.Path,
        ),
    "private_key":
        HelpData(
            description="Location of the private key file.",
            format=pathlib.Path,
        ),
    "message":
        HelpData(description="Message to transform, character by character.", format=str),
    "codes":
        HelpData(description="Encoded values, separated by commas or spaces.", format=parse_codes),
    "steps":
        HelpData(
            description="Show the intermediate steps?",
            choices=["Y", "N"],
            advanced=True,
            default="Y",
        ),
    "overwrite":
        HelpData(
            description="Overwrite specified destination files if they exist?",
            choices=["Y", "N"],
            default="N",
        )
}

needs = {
    "prime": ("value", "steps"),
    "candidates": ("p", "q"),
    "keygen": ("p", "q", "e", "steps"),
    "encode": ("public_key", "message", "steps"),
    "decode": ("private_key", "codes", "steps"),
    "sign": ("private_key", "message", "steps"),
    "verify": ("public_key", "codes", "steps"),
}

pubkey = argparse.ArgumentParser(add_help=False)
pubkey.add_argument("--public_key", "-k", type=help_dict["public_key"].format, help=help_dict["public_key"].description)
privkey = argparse.ArgumentParser(add_help=False)
privkey.add_argument("--private_key",
                     "-K",
                     type=help_dict["private_key"].format,
                     help=help_dict["private_key"].description)
primes = argparse.ArgumentParser(add_help=False)
primes.add_argument("--p", type=help_dict["p"].format, help=help_dict["p"].description)
primes.add_argument("--q", type=help_dict["q"].format, help=help_dict["q"].description)
payloads = argparse.ArgumentParser(add_help=False)
payloads.add_argument("--message", "-m", type=help_dict["message"].format, help=help_dict["message"].description)
encoded = argparse.ArgumentParser(add_help=False)
encoded.add_argument("--codes", "-c", type=help_dict["codes"].format, help=help_dict["codes"].description)
steps = argparse.ArgumentParser(add_help=False)
steps.add_argument("--quiet-steps", "-Q", dest="steps", action="store_const", const="N", help="Hide intermediate steps")
corep = argparse.ArgumentParser(prog="rsaviz")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {rsaviz.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Enable advanced mode, for interactive mode")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

prime = commands.add_parser("prime", parents=[steps], help=help_dict["prime"].description)
prime.add_argument("--value", type=help_dict["value"].format, help=help_dict["value"].description)
candidates = commands.add_parser("candidates", parents=[primes], help=help_dict["candidates"].description)
keygen = commands.add_parser("keygen", parents=[primes, steps, privkey, pubkey], help=help_dict["keygen"].description)
keygen.add_argument("--e", type=help_dict["e"].format, help=help_dict["e"].description)
keygen.add_argument("--overwrite", "-o", action="store_const", const="Y", help=help_dict["overwrite"].description)
encode = commands.add_parser("encode", parents=[pubkey, payloads, steps], help=help_dict["encode"].description)
decode = commands.add_parser("decode", parents=[privkey, encoded, steps], help=help_dict["decode"].description)
sign = commands.add_parser("sign", parents=[privkey, payloads, steps], help=help_dict["sign"].description)
verify = commands.add_parser("verify", parents=[pubkey, encoded, steps], help=help_dict["verify"].description)


def checkmodes(arg: str, mode: tuple[bool, bool]):
    helper_data = help_dict[arg]
    if (mode[0] or (helper_data.advanced and not mode[1])) and helper_data.default:
        return helper_data.default
    if mode[0]:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    vald = set(helper_data.choices)
    for choice in helper_data.choices:
        defstring = " (Default)" if choice == helper_data.default else ""
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}" + defstring)
        else:
            prntr(f"{choice}" + defstring)
    if helper_data.default is not None:
        prntr("To accept default just click enter. Otherwise specify value.")
    while True:
        ch = input(f"{arg}: ")
        if ch in vald:
            return ch
        if not ch and helper_data.default is not None:
            return helper_data.default
        prntr("Please select an option from the list.")


def input_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch and helper_data.default is not None:
            return helper_data.default
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def show_operations(operations: list[rsaviz.CharOperation], prntr: typing.Callable = print) -> None:
    for op in operations:
        prntr(f"  [{op.input_code}] {op.expression} = {op.output_code}")


def show_derivation(kd: rsaviz.KeyDerivation, prntr: typing.Callable = print) -> None:
    for check in kd.prime_checks:
        prntr(f"Divisors tried for {check.value}: {', '.join(str(d) for d in check.divisors)} -> prime")
    prntr(f"n = {kd.p} * {kd.q} = {kd.n}")
    prntr(f"phi(n) = ({kd.p} - 1) * ({kd.q} - 1) = {kd.phi}")
    prntr(f"{len(kd.candidates)} valid exponent candidates.")
    prntr("Extended Euclid (i, r, q, x, y):")
    for step in kd.egcd_steps:
        prntr(f"  {step.index:>3} {step.remainder:>8} {step.quotient:>8} {step.x:>8} {step.y:>8}")
    prntr("Search for k in d = (1 + k * phi) / e:")
    for it in kd.k_search.iterations:
        prntr(f"  k = {it.k}: (1 + {it.k} * {kd.phi}) mod {it.e} = {it.remainder} {'OK' if it.is_valid else 'X'}")
    prntr(f"k = {kd.k_search.selected}")


def run(args: argparse.Namespace, pspr: typing.Callable) -> None:
    """Executes the fully specified subcommand."""
    sprnt = pspr if getattr(args, "steps", "Y") == "Y" else (lambda *_: None)
    match args.subcommand:
        case "prime":
            check = rsaviz.check_prime(args.value)
            sprnt(f"Divisors tried: {', '.join(str(d) for d in check.divisors)}")
            print(f"{check.value} is {'prime' if check.is_prime else 'not prime'}")
        case "candidates":
            rsaviz.validate_primes(args.p, args.q)
            phi = (args.p - 1) * (args.q - 1)
            pspr(f"phi(n) = {phi}")
            print(" ".join(str(c) for c in rsaviz.get_candidate_es(phi)))
        case "keygen":
            kd = rsaviz.derive_key_pair(args.p, args.q, args.e)
            show_derivation(kd, sprnt)
            pspr(f"Public key (e, n) = ({kd.e}, {kd.n})")
            pspr(f"Private key (d, n) = ({kd.d}, {kd.n})")
            print(f"d = {kd.d}")
            if getattr(args, "private_key", None) is not None and getattr(args, "public_key", None) is not None:
                if args.private_key.exists() or args.public_key.exists():
                    rs = getattr(args, "overwrite", None)
                    if rs is None:
                        rs = choice_handler("overwrite", (args.non_interactive, args.advanced), pspr)
                    if rs == "N":
                        print("Destination private or public key already exists!")
                        return
                rpk = rsaviz.RSAPrivKey.from_derivation(kd)
                rpk.export(args.private_key)
                rpk.pub.export(args.public_key)
                pspr("\nKey pair exported!")
        case "encode":
            rpu = rsaviz.RSAPubKey.import_key(args.public_key)
            ops = rpu.encode(args.message)
            show_operations(ops, sprnt)
            print(" ".join(str(op.output_code) for op in ops))
        case "decode":
            rpk = rsaviz.RSAPrivKey.import_key(args.private_key)
            text, ops = rpk.decode(args.codes)
            show_operations(ops, sprnt)
            print(text)
        case "sign":
            rpk = rsaviz.RSAPrivKey.import_key(args.private_key)
            ops = rpk.sign(args.message)
            show_operations(ops, sprnt)
            print(" ".join(str(op.output_code) for op in ops))
        case "verify":
            rpu = rsaviz.RSAPubKey.import_key(args.public_key)
            text, ops = rpu.verify(args.codes)
            show_operations(ops, sprnt)
            print(text)


def main(argv: list[str] | None = None):
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    pstatus = (args.non_interactive, args.advanced)

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    pspr("Welcome to RSA Viz!\n")
    if not args.subcommand:
        args.subcommand = choice_handler("subcommand", pstatus)
    for reqs in needs[args.subcommand]:
        if getattr(args, reqs, None) is None:
            if help_dict[reqs].choices is not None:
                res = choice_handler(reqs, pstatus)
            else:
                res = input_handler(reqs, pstatus)
            setattr(args, reqs, res)
        else:
            pspr(f"{reqs}: {getattr(args, reqs)}")
    pspr("\nInput Complete! Executing...")
    try:
        run(args, pspr)
    except (ValueError, rsaviz.NoInverseError) as exc:
        print(f"Error: {exc}")
        sys.exit(1)
    pspr("Thank you for using RSA Viz!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
