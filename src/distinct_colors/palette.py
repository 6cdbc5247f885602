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

from typing import Hashable, Iterable

from .color import generate_distinct_colors


def assign_distinct_colors(labels: Iterable[Hashable]) -> dict[Hashable, str]:
    """Map each distinct label to its own color.

    Duplicated labels are counted once and the colors are dealt by order of
    first appearance, so the first label is always red.

    Parameters
    ----------
    labels : Iterable[Hashable]
        The labels to color, for instance the names of the series of a chart.

    Returns
    -------
    dict
        The color '#rrggbb' of each label.

    Examples
    --------
    >>> assign_distinct_colors(['a', 'b', 'a', 'c'])
    {'a': '#e64545', 'b': '#45e645', 'c': '#4545e6'}
    >>> assign_distinct_colors([])
    {}
    """
    unique_labels = list(dict.fromkeys(labels))
    return dict(zip(unique_labels, generate_distinct_colors(len(unique_labels))))
