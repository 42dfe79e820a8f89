'''
    Filling a numpy histogram through one overloaded entry point: an array
    of values, an array with weights, or loose values
'''
from dataclasses import dataclass

import numpy as np

from overloadkit import define, Variadic, Placeholder

@dataclass
class AxisSpec:

    nbins: int
    xmin: float
    xmax: float

def _edges(axis_spec_x: AxisSpec):
    return np.linspace(axis_spec_x.xmin, axis_spec_x.xmax, axis_spec_x.nbins + 1)

def fill_array(data, axis_spec_x: AxisSpec, weights=None):
    counts, _ = np.histogram(np.asarray(data), bins=_edges(axis_spec_x), weights=weights)
    return counts

def fill_values(axis_spec_x: AxisSpec, *values):
    return fill_array(values, axis_spec_x)

fill = define('array', AxisSpec, fill_array, name='fill') \
             ('array', AxisSpec, 'array', fill_array) \
             (AxisSpec, Variadic('number'), fill_values)()

def histogram_fill_example():

    axis_spec_x = AxisSpec(5, 0., 5.)
    data = np.random.default_rng(42).uniform(0., 5., 1000)

    print('from array:  ', fill(data, axis_spec_x))
    print('weighted:    ', fill(data, axis_spec_x, np.full(data.size, 0.5)))
    print('no weights:  ', fill(data, axis_spec_x, Placeholder('array')))
    print('from values: ', fill(axis_spec_x, 0.5, 1.5, 1.7, 4.2))

if __name__ == '__main__':
    histogram_fill_example()
