# Copyright 2025 ICube (University of Strasbourg - CNRS)
# author: Julien PONTABRY (ICube)
#
# This software is a computer program whose purpose is to generate sets of
# visually distinct colors, for instance to tell apart the series of a chart
# or the nodes of a graph.
#
# This software is governed by the CeCILL-B license under French law and
# abiding by the rules of distribution of free software. You can use,
# modify and/or redistribute the software under the terms of the CeCILL-B
# license as circulated by CEA, CNRS and INRIA at the following URL
# "http://www.cecill.info".
#
# As a counterpart to the access to the source code and rights to copy,
# modify and redistribute granted by the license, users are provided only
# with a limited warranty and the software's author, the holder of the
# economic rights, and the successive licensors have only limited
# liability.
#
# In this respect, the user's attention is drawn to the risks associated
# with loading, using, modifying and/or developing or reproducing the
# software by the user in light of its specific status of free software,
# that may mean that it is complicated to manipulate, and that also
# therefore means that it is reserved for developers and experienced
# professionals having in-depth computer knowledge. Users are therefore
# encouraged to load and test the software's suitability as regards their
# requirements in conditions enabling the security of their systems and/or
# data to be ensured and, more generally, to use and operate it in the
# same conditions as regards security.
#
# The fact that you are presently reading this means that you have had
# knowledge of the CeCILL-B license and that you accept its terms.

import unittest

from test_color import (
    GenerateDistinctColorsTestCase, HueInterpolatorTestCase, ColorsInterpolatorTestCase,
    HsbToRgbTestCase, RgbToHexTestCase
)
from test_palette import AssignDistinctColorsTestCase
from test_cli import GenerateCommandTestCase, PaletteCommandTestCase, PlotCommandTestCase


def color_suite():
    suite = unittest.TestSuite()
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(GenerateDistinctColorsTestCase))
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(HueInterpolatorTestCase))
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(ColorsInterpolatorTestCase))
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(HsbToRgbTestCase))
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(RgbToHexTestCase))
    return suite

def palette_suite():
    suite = unittest.TestSuite()
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(AssignDistinctColorsTestCase))
    return suite

def cli_suite():
    suite = unittest.TestSuite()
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(GenerateCommandTestCase))
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(PaletteCommandTestCase))
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(PlotCommandTestCase))
    return suite

if __name__ == '__main__':
    runner = unittest.TextTestRunner()

    total_failed = 0

    for suite in (color_suite(), palette_suite(), cli_suite()):
        result = runner.run(suite)
        total_failed += len(result.failures) + len(result.errors)

    if total_failed > 0:
        exit(1)
