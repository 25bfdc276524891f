import copy

import pytest

from dx_vue_generator.codegen.core.model import MetadataModel

SAMPLE_METADATA = {
    "widgets": [
        {
            "name": "dxButton",
            "exportPath": "ui/button",
            "isEditor": False,
            "isExtension": False,
            "optionsTypeParams": [],
            "reexports": ["default"],
            "options": [
                {"name": "key", "types": [{"type": "String"}]},
                {"name": "text", "types": [{"type": "String"}]},
                {
                    "name": "stylingMode",
                    "types": [{"type": "String", "acceptableValues": ["text", "outlined"]}],
                },
                {
                    "name": "tabIndex",
                    "types": [{"type": "Number", "acceptableValues": [1, 2]}],
                },
            ],
            "nesteds": [],
        },
        {
            "name": "dxList",
            "exportPath": "ui/list",
            "isEditor": False,
            "optionsTypeParams": ["TItem", "TKey"],
            "reexports": ["default", "ItemClickEvent"],
            "options": [
                {"name": "items", "types": [{"type": "Array"}]},
                {"name": "dataSource", "types": [{"type": "DataSourceConfig"}]},
            ],
            "complexOptions": [
                {
                    "name": "item",
                    "optionName": "items",
                    "isCollectionItem": True,
                    "predefinedProps": {"kind": "default"},
                    "props": [
                        {"name": "key", "types": [{"type": "String"}]},
                        {"name": "disabled", "types": [{"type": "Boolean"}]},
                        {"name": "text", "types": [{"type": "String"}]},
                    ],
                    "nesteds": [],
                }
            ],
            "nesteds": [
                {"componentName": "item", "optionName": "items", "isCollectionItem": True}
            ],
        },
        {
            "name": "dxValidator",
            "exportPath": "ui/validator",
            "isExtension": True,
            "isEditor": True,
            "optionsTypeParams": [],
            "reexports": [],
            "options": [{"name": "name", "types": [{"type": "String"}]}],
            "complexOptions": [],
            "nesteds": [],
        },
    ],
    "customTypes": [
        {"name": "DataSourceConfig", "types": [{"type": "Array"}, {"type": "Object"}]},
    ],
    "commonReexports": {
        "common": ["Format", "Position"],
        "common/charts": ["ChartSeries"],
    },
}


@pytest.fixture
def sample_metadata():
    return copy.deepcopy(SAMPLE_METADATA)


@pytest.fixture
def sample_model(sample_metadata):
    return MetadataModel.from_dict(sample_metadata)
