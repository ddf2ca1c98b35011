# SPDX-License-Identifier: BSD-2-Clause
from amaranth import Module, unsigned
from amaranth.lib import wiring
from amaranth.lib.wiring import In, Out

__all__ = ["Adder"]


class Adder(wiring.Component):
    x: In(unsigned(8))
    y: In(unsigned(8))
    sum: Out(unsigned(9))

    def elaborate(self, platform):
        m = Module()
        m.d.comb += self.sum.eq(self.x + self.y)
        return m
