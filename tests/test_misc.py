"""Tests for miscellaneous instructions (Fxxx)."""

import jax.numpy as jnp
import pytest
from octet import MemoryRangeError, execute


class TestTimers:
    """Test timer-related instructions."""

    def test_misc_timer_instructions(self, fresh_state):
        """Test timer set and get operations."""
        state = execute(fresh_state, 0x6030)  # V0 = 48
        state = execute(state, 0xF015)  # DT = V0
        assert state.delay_timer == 48

        state = execute(state, 0x6120)  # V1 = 32
        state = execute(state, 0xF118)  # ST = V1
        assert state.sound_timer == 32

        state = execute(state, 0xF207)  # V2 = DT
        assert state.V[2] == 48


class TestIndexArithmetic:
    """FX1E and FX29."""

    def test_add_to_index(self, fresh_state):
        """FX1E - I += VX."""
        state = execute(fresh_state, 0xA300)
        state = execute(state, 0x6510)
        state = execute(state, 0xF51E)
        assert state.I == 0x310

    def test_add_to_index_has_no_flag_effect(self, fresh_state):
        """FX1E - Going past 0xFFF neither masks I nor touches VF."""
        state = execute(fresh_state, 0xAFFF)
        state = execute(state, 0x6502)
        state = execute(state, 0x6F07)
        state = execute(state, 0xF51E)
        assert state.I == 0x1001
        assert state.V[15] == 7

    def test_add_to_index_past_register_width(self, fresh_state):
        """FX1E - A sum that does not fit in I raises instead of wrapping to the font."""
        state = fresh_state.replace(I=jnp.astype(0xFFFF, jnp.uint16))
        state = execute(state, 0x6502)
        with pytest.raises(MemoryRangeError):
            execute(state, 0xF51E)

        # Reaching 0xFFFF exactly is allowed; the next store reports the overrun
        state = execute(state, 0x6500)
        state = execute(state, 0xF51E)
        assert state.I == 0xFFFF
        with pytest.raises(MemoryRangeError):
            execute(state, 0xF055)

    def test_font_all_characters(self, fresh_state):
        """FX29 - Glyph addresses are 5 bytes apart starting at 0."""
        state = fresh_state
        for digit in range(16):
            state = execute(state, 0x6000 | digit)
            state = execute(state, 0xF029)
            assert state.I == digit * 5, f"Font address wrong for digit {digit:X}"


class TestBCD:
    """Test BCD conversion."""

    @pytest.mark.parametrize("value,digits", [
        (123, [1, 2, 3]),
        (0, [0, 0, 0]),
        (255, [2, 5, 5]),
        (9, [0, 0, 9]),
        (40, [0, 4, 0]),
    ])
    def test_bcd_conversion(self, fresh_state, value, digits):
        """FX33 - Hundreds, tens, ones at I, I+1, I+2."""
        state = execute(fresh_state, 0x6700 | value)
        state = execute(state, 0xA300)
        state = execute(state, 0xF733)

        assert [int(b) for b in state.memory[0x300:0x303]] == digits
        assert state.I == 0x300

    def test_bcd_past_memory(self, fresh_state):
        """FX33 - Writing beyond 0xFFF is refused."""
        state = execute(fresh_state, 0xAFFE)
        with pytest.raises(MemoryRangeError):
            execute(state, 0xF033)


class TestRegisterTransfers:
    """Test store/load register operations."""

    def test_store_registers_inclusive(self, fresh_state):
        """FX55 - Copies V0..VX inclusive, nothing beyond."""
        state = fresh_state.replace(V=fresh_state.V.at[0].set(1).at[1].set(2).at[2].set(3).at[3].set(4))
        state = execute(state, 0xA400)

        state = execute(state, 0xF255)

        assert [int(b) for b in state.memory[0x400:0x404]] == [1, 2, 3, 0]
        assert state.I == 0x400

    def test_load_registers_inclusive(self, fresh_state):
        """FX65 - Fills V0..VX inclusive, leaves the rest."""
        state = execute(fresh_state, 0xA000)  # font glyph 0: F0 90 90 90 F0
        state = execute(state, 0x6377)

        state = execute(state, 0xF265)

        assert [int(v) for v in state.V[:4]] == [0xF0, 0x90, 0x90, 0x77]
        assert state.I == 0x000

    def test_store_load_round_trip(self, fresh_state):
        """FX55 then FX65 restore all sixteen registers."""
        state = fresh_state.replace(V=jnp.arange(0x10, 0x20, dtype=jnp.uint8))
        state = execute(state, 0xA500)
        state = execute(state, 0xFF55)
        cleared = state.replace(V=state.V.at[:].set(0))

        restored = execute(cleared, 0xFF65)

        assert (restored.V == state.V).all()

    def test_store_registers_past_memory(self, fresh_state):
        """FX55 - The (X+1)-byte range must fit below 0x1000."""
        state = execute(fresh_state, 0xAFFC)
        assert execute(state, 0xF355).memory[0xFFF] == 0
        with pytest.raises(MemoryRangeError):
            execute(state, 0xF455)

    def test_load_registers_past_memory(self, fresh_state):
        """FX65 - Reading beyond 0xFFF is refused and registers are unchanged."""
        state = execute(fresh_state, 0xAFFF)
        with pytest.raises(MemoryRangeError):
            execute(state, 0xF165)
