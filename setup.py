from setuptools import setup, find_packages

setup(
    name='graph-reconciler',
    version='1.0.0',
    description='Incremental graph reconciliation between line-oriented text and a visual renderer',
    packages=find_packages(include=[
        'graph_api', 'graph_api.*',
        'graph_services', 'graph_services.*',
        'graph_reconciler', 'graph_reconciler.*',
        'cytoscape_renderer', 'cytoscape_renderer.*',
    ]),
    package_data={
        'cytoscape_renderer': ['templates/*.html'],
    },
    install_requires=[
        'jinja2>=3.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'graph_reconciler.renderer': [
            'memory = graph_reconciler.memory_renderer:InMemoryRenderer',
            'cytoscape = cytoscape_renderer.plugin:CytoscapeRenderer',
        ],
        'graph_reconciler.visualizer': [
            'cytoscape = cytoscape_renderer.plugin:CytoscapeVisualizer',
        ],
        'console_scripts': [
            'graph-reconciler = graph_reconciler.cli.repl:main',
        ],
    },
    python_requires='>=3.10',
)
