from typing import Dict, List, Union

# One parsed data row: header name -> raw string value
FieldMapping = Dict[str, str]

# A singleton source holds one mapping, a repeating source a list of them
Dataset = Union[FieldMapping, List[FieldMapping]]
