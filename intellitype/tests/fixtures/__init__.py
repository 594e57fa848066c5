"""Test fixtures for intellitype tests.

This module provides sample model objects and model documents for testing
the code generation functionality.
"""

from intellitype.codegen.model import ModelObject, ModelProperty

PERSON = ModelObject(
    name='Person',
    full_name='Acme.Models.Person',
    properties=[
        ModelProperty(name='Age', type='int', summary='Age in years.'),
        ModelProperty(name='Name', type='String'),
        ModelProperty(name='Born', type='System.DateTime'),
        ModelProperty(
            name='Tags', type='System.Collections.Generic.List<System.String>'
        ),
        ModelProperty(name='Scores', type='Double[]'),
        ModelProperty(name='Manager', type='Acme.Models.Person'),
    ],
)

EMPTY = ModelObject(name='Empty', full_name='Acme.Models.Empty')

PAGE = ModelObject(
    name='Page',
    full_name='Acme.Models.Page<int>',
    properties=[
        ModelProperty(name='Index', type='int?'),
        ModelProperty(name='Items', type='System.Collections.Generic.List<Widget>'),
    ],
)

MODEL_YAML = """
objects:
  - name: Person
    fullName: Acme.Models.Person
    properties:
      - name: Age
        type: int
        summary: Age in years.
      - name: Tags
        type: System.Collections.Generic.List<System.String>
  - name: Empty
    full_name: Acme.Models.Empty
"""

MODEL_JSON = """
{
  "objects": [
    {
      "name": "Widget",
      "fullName": "Acme.Widget",
      "properties": [
        {"name": "Enabled", "type": "bool"}
      ]
    }
  ]
}
"""
