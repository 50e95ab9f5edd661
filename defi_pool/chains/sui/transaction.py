"""Unsigned programmable transaction requests and their BCS encoding."""
from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any, Union

from . import bcs

# ---------------------------------------------------------------------------
# Arguments
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GasCoin:
    """The coin paying for gas, usable as a command argument."""


@dataclass(frozen=True)
class Input:
    index: int


@dataclass(frozen=True)
class Result:
    index: int


@dataclass(frozen=True)
class NestedResult:
    index: int
    result_index: int


Argument = Union[GasCoin, Input, Result, NestedResult]

# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PureInput:
    """A BCS-encodable plain value (``u64`` or ``address``)."""

    value: int | str
    type_tag: str

    def to_bytes(self) -> bytes:
        if self.type_tag == "u64":
            return bcs.encode_u64(int(self.value))
        if self.type_tag == "address":
            return bcs.encode_address(str(self.value))
        raise ValueError(f"Unsupported pure type: {self.type_tag}")


@dataclass(frozen=True)
class ObjectInput:
    """An on-chain object referenced by ID; resolved before serialization."""

    object_id: str
    mutable: bool = True


@dataclass(frozen=True)
class SharedObjectArg:
    """Fully resolved reference to a shared object."""

    object_id: str
    initial_shared_version: int
    mutable: bool


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SplitCoins:
    coin: Argument
    amounts: tuple[Argument, ...]


@dataclass(frozen=True)
class MoveCall:
    package: str
    module: str
    function: str
    arguments: tuple[Argument, ...] = ()

    @property
    def target(self) -> str:
        return f"{self.package}::{self.module}::{self.function}"


Command = Union[SplitCoins, MoveCall]


def shared_object_arg(
    object_response: dict[str, Any], mutable: bool
) -> SharedObjectArg:
    """Build a shared object reference from a ``sui_getObject`` response."""
    data = object_response.get("data") or {}
    object_id = data.get("objectId", "")
    owner = data.get("owner")
    if not isinstance(owner, dict) or "Shared" not in owner:
        raise ValueError(f"Object {object_id or '?'} is not a shared object")
    version = int(owner["Shared"]["initial_shared_version"])
    return SharedObjectArg(
        object_id=object_id, initial_shared_version=version, mutable=mutable
    )


class TransactionRequest:
    """Composable, unsigned description of a programmable transaction."""

    gas = GasCoin()

    def __init__(self) -> None:
        self.inputs: list[PureInput | ObjectInput] = []
        self.commands: list[Command] = []

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    def _add_input(self, value: PureInput | ObjectInput) -> Input:
        self.inputs.append(value)
        return Input(len(self.inputs) - 1)

    def object(self, object_id: str, mutable: bool = True) -> Input:
        """Reference an object; the same ID is only added once."""
        for index, existing in enumerate(self.inputs):
            if isinstance(existing, ObjectInput) and existing.object_id == object_id:
                if mutable and not existing.mutable:
                    self.inputs[index] = ObjectInput(object_id, mutable=True)
                return Input(index)
        return self._add_input(ObjectInput(object_id, mutable=mutable))

    def pure_u64(self, value: int) -> Input:
        return self._add_input(PureInput(value=int(value), type_tag="u64"))

    def pure_address(self, address: str) -> Input:
        return self._add_input(PureInput(value=address, type_tag="address"))

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def _add_command(self, command: Command) -> Result:
        self.commands.append(command)
        return Result(len(self.commands) - 1)

    def split_coins(self, coin: Argument, amounts: list[int]) -> list[NestedResult]:
        """Split *coin* into new coins, one per amount (in MIST)."""
        amount_args = tuple(self.pure_u64(amount) for amount in amounts)
        result = self._add_command(SplitCoins(coin=coin, amounts=amount_args))
        return [NestedResult(result.index, i) for i in range(len(amounts))]

    def move_call(self, target: str, arguments: list[Argument]) -> Result:
        """Call ``package::module::function`` with the given arguments."""
        package, module, function = target.split("::")
        return self._add_command(
            MoveCall(
                package=package,
                module=module,
                function=function,
                arguments=tuple(arguments),
            )
        )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def move_calls(self) -> list[MoveCall]:
        return [c for c in self.commands if isinstance(c, MoveCall)]

    def object_ids(self) -> list[str]:
        return [i.object_id for i in self.inputs if isinstance(i, ObjectInput)]

    def resolve_input(self, argument: Argument) -> PureInput | ObjectInput:
        if not isinstance(argument, Input):
            raise TypeError(f"{argument!r} is not a transaction input")
        return self.inputs[argument.index]

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly description of inputs and commands."""
        inputs: list[dict[str, Any]] = []
        for inp in self.inputs:
            if isinstance(inp, PureInput):
                inputs.append({"kind": "pure", "type": inp.type_tag, "value": inp.value})
            else:
                inputs.append(
                    {"kind": "object", "objectId": inp.object_id, "mutable": inp.mutable}
                )

        commands: list[dict[str, Any]] = []
        for cmd in self.commands:
            if isinstance(cmd, SplitCoins):
                commands.append(
                    {
                        "SplitCoins": {
                            "coin": _describe_argument(cmd.coin),
                            "amounts": [_describe_argument(a) for a in cmd.amounts],
                        }
                    }
                )
            else:
                commands.append(
                    {
                        "MoveCall": {
                            "target": cmd.target,
                            "arguments": [_describe_argument(a) for a in cmd.arguments],
                        }
                    }
                )

        return {"inputs": inputs, "commands": commands}

    # ------------------------------------------------------------------
    # BCS
    # ------------------------------------------------------------------

    def to_kind_bytes(self, object_args: dict[str, SharedObjectArg]) -> bytes:
        """Serialize as ``TransactionKind::ProgrammableTransaction``.

        Args:
            object_args: Resolved references keyed by object ID, one for every
                object input of this request.
        """
        encoded_inputs: list[bytes] = []
        for inp in self.inputs:
            if isinstance(inp, PureInput):
                # CallArg::Pure
                encoded_inputs.append(b"\x00" + bcs.encode_bytes(inp.to_bytes()))
                continue
            resolved = object_args.get(inp.object_id)
            if resolved is None:
                raise ValueError(f"Unresolved object input: {inp.object_id}")
            # CallArg::Object(ObjectArg::SharedObject)
            encoded_inputs.append(
                b"\x01\x01"
                + bcs.encode_address(resolved.object_id)
                + bcs.encode_u64(resolved.initial_shared_version)
                + bcs.encode_bool(resolved.mutable)
            )

        return (
            b"\x00"
            + bcs.encode_vector(encoded_inputs, lambda b: b)
            + bcs.encode_vector(self.commands, _encode_command)
        )

    def to_base64(self, object_args: dict[str, SharedObjectArg]) -> str:
        return base64.b64encode(self.to_kind_bytes(object_args)).decode("ascii")


def _describe_argument(arg: Argument) -> Any:
    if isinstance(arg, GasCoin):
        return "GasCoin"
    if isinstance(arg, Input):
        return {"Input": arg.index}
    if isinstance(arg, Result):
        return {"Result": arg.index}
    return {"NestedResult": [arg.index, arg.result_index]}


def _encode_argument(arg: Argument) -> bytes:
    if isinstance(arg, GasCoin):
        return b"\x00"
    if isinstance(arg, Input):
        return b"\x01" + bcs.encode_u16(arg.index)
    if isinstance(arg, Result):
        return b"\x02" + bcs.encode_u16(arg.index)
    return b"\x03" + bcs.encode_u16(arg.index) + bcs.encode_u16(arg.result_index)


def _encode_command(cmd: Command) -> bytes:
    if isinstance(cmd, MoveCall):
        return (
            b"\x00"
            + bcs.encode_address(cmd.package)
            + bcs.encode_str(cmd.module)
            + bcs.encode_str(cmd.function)
            + bcs.encode_uleb128(0)  # no type arguments
            + bcs.encode_vector(cmd.arguments, _encode_argument)
        )
    return (
        b"\x02"
        + _encode_argument(cmd.coin)
        + bcs.encode_vector(cmd.amounts, _encode_argument)
    )
