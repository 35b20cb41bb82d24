"""CHIP-8 stack operations."""

import jax.numpy as jnp
from octet.constants import STACK_SIZE
from octet.errors import StackOverflowError, StackUnderflowError
from octet.state import StackState


def push(stack: StackState, address: int) -> StackState:
    """Push address onto stack."""
    if stack.pointer >= STACK_SIZE:
        raise StackOverflowError(f"Call stack overflow: {STACK_SIZE} return addresses already stored")
    new_data = stack.data.at[stack.pointer].set(jnp.astype(address, jnp.uint16))
    return stack.replace(data=new_data, pointer=stack.pointer + 1)


def pop(stack: StackState) -> tuple[StackState, int]:
    """Pop address from stack."""
    if stack.pointer <= 0:
        raise StackUnderflowError("Return with an empty call stack")
    new_pointer = stack.pointer - 1
    popped_address = int(stack.data[new_pointer])
    new_data = stack.data.at[new_pointer].set(0)
    return stack.replace(data=new_data, pointer=new_pointer), popped_address
