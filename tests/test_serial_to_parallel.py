# SPDX-License-Identifier: BSD-2-Clause
"""Simulation harness for the serial-to-parallel converter.

Drives the design through a reset, shifts in a nibble LSB first, loads it and
checks the parallel output.
"""

import logging
import unittest

from amaranth.sim import Simulator

from fixtures.serial_to_parallel import SerialToParallel


logger = logging.getLogger(__name__)


class SerialToParallelTestCase(unittest.TestCase):
    def setUp(self):
        self.dut = SerialToParallel()
        self.sim = Simulator(self.dut)
        self.sim.add_clock(1e-6)

    async def _reset(self, ctx):
        ctx.set(self.dut.rst_n, 0)
        await ctx.tick()
        ctx.set(self.dut.rst_n, 1)
        await ctx.tick()

    async def _shift_in(self, ctx, pattern):
        """Shift in four bits of ``pattern``, LSB first, then load them."""
        logger.debug(f"Shifting in pattern 0b{pattern:04b}")
        for bit_idx in range(4):
            ctx.set(self.dut.serial_in, (pattern >> bit_idx) & 1)
            ctx.set(self.dut.load_enable, 0)
            await ctx.tick()

        ctx.set(self.dut.load_enable, 1)
        ctx.set(self.dut.serial_in, 0)
        await ctx.tick()
        return ctx.get(self.dut.parallel_out), ctx.get(self.dut.valid)

    def test_patterns(self):
        results = []

        async def testbench(ctx):
            await self._reset(ctx)
            for pattern in (0b1010, 0b0101):
                actual, valid = await self._shift_in(ctx, pattern)
                results.append((pattern, actual, valid))

        self.sim.add_testbench(testbench)
        self.sim.run()

        self.assertEqual(len(results), 2)
        for expected, actual, valid in results:
            self.assertEqual(actual, expected, f"pattern mismatch for 0b{expected:04b}")
            self.assertEqual(valid, 1)

    def test_reset_clears_output(self):
        results = []

        async def testbench(ctx):
            await self._reset(ctx)
            await self._shift_in(ctx, 0b1111)
            ctx.set(self.dut.load_enable, 0)
            await self._reset(ctx)
            results.append((ctx.get(self.dut.parallel_out), ctx.get(self.dut.valid)))

        self.sim.add_testbench(testbench)
        self.sim.run()

        self.assertEqual(results, [(0, 0)])
