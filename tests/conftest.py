"""Shared fixtures: a small path-shaped metadata graph A-B-C-D-E."""

import json

import pytest

from depscope.core.graph import GraphModel

PATH_EXPORT = {
    "nodes": [
        {"id": "a", "type": "ApexClass", "fullName": "AccountService",
         "fileName": "classes/AccountService.cls", "x": 0, "y": 0},
        {"id": "b", "type": "ApexTrigger", "fullName": "AccountTrigger",
         "fileName": "triggers/AccountTrigger.trigger", "x": 10, "y": 0},
        {"id": "c", "type": "CustomObject", "fullName": "Account",
         "fileName": "objects/Account.object", "x": 20, "y": 0},
        {"id": "d", "type": "ApexClass", "fullName": "ContactService",
         "fileName": "classes/ContactService.cls", "namespacePrefix": "crm", "x": 30, "y": 0},
        {"id": "e", "type": "CustomObject", "fullName": "Contact",
         "fileName": "objects/Contact.object", "x": 40, "y": 0},
    ],
    # Mixed directions: adjacency must not depend on them
    "edges": [
        {"source": "b", "target": "a"},
        {"source": "b", "target": "c"},
        {"source": "d", "target": "c"},
        {"source": "d", "target": "e"},
    ],
}


@pytest.fixture
def path_export():
    return json.loads(json.dumps(PATH_EXPORT))


@pytest.fixture
def path_graph(path_export):
    return GraphModel.from_dict(path_export)


@pytest.fixture
def nodes(path_graph):
    """The path graph's nodes by id."""
    return {node.id: node for node in path_graph.iter_nodes()}


@pytest.fixture
def graph_file(tmp_path, path_export):
    f = tmp_path / "tgraph.json"
    f.write_text(json.dumps(path_export))
    return f
