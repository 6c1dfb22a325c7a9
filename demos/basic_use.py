# Copyright (c) 2023 Ian Hill
# SPDX-License-Identifier: Apache-2.0

import os
import sys
# Welcome to the worst parts of Python! This line adds the parent directory of this file to module search path, from
# which the powellmin module can be seen and then imported. Without this line the script cannot find the module without
# installing it as a package from pip (which is undesirable because you would have to rebuild the package every time
# you changed part of the code).
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import powellmin # noqa: ImportNotAtTopOfFile
from powellmin.cookbook import rosenbrock # noqa: ImportNotAtTopOfFile
from powellmin.helpers import logger, _on_demand_import # noqa: ImportNotAtTopOfFile

click = _on_demand_import('click')
plt = _on_demand_import('matplotlib.pyplot', 'matplotlib')

DATA_FILE_NAME = 'basic_report'


def run_minimization(dims: int = 2, save_file: str = None):
    """
    Demonstration of the simplest use of powellmin, useful as a template and starting point for your own problems.
    """
    ########################################################################
    ### 1. Define the objective and where to search                      ###
    ########################################################################
    bench = rosenbrock(dims)

    ########################################################################
    ### 2. Minimize, asking for the diagnostic report as well            ###
    ########################################################################
    x, report = powellmin.minimize_powell(bench, bench.start, bounds=bench.bounds, max_iter=10 + dims * 10,
                                          verbose=True, full_output=True)
    logger.info(f'Finished with {report.message} after {report.evaluations} evaluations, minimum found at {x}.')

    # Save the search history to a JSON file for reuse if desired
    if save_file:
        report.export_to_json(save_file)
    return report


def visualize(report):
    visited = report.visited()
    f1, p1 = plt.subplots(figsize=(8, 6))
    # Only the first two coordinates can be drawn, enough to see the path bend along the valley
    p1.plot(visited['x0'], visited['x1'], marker='o', color='mediumpurple')
    p1.plot([1], [1], marker='*', markersize=15, color='green')
    p1.set(xlabel='x0', ylabel='x1', title="Powell's Method on the Rosenbrock Valley")
    plt.show()


@click.command
@click.option('--dims', default=2, help='Dimensionality of the Rosenbrock function to minimize.')
@click.option('--no-plot', is_flag=True, default=False, help='If provided, the visited points are not plotted.')
@click.option('--save-data', is_flag=True, default=False, help='If provided, the search history will be saved to JSON.')
def entry(dims, no_plot, save_data):
    data_file = os.path.join(os.path.dirname(__file__), f"data/{DATA_FILE_NAME}.json") if save_data else None
    report = run_minimization(dims, save_file=data_file)
    if not no_plot and dims >= 2:
        visualize(report)


if __name__ == '__main__':
    entry()
