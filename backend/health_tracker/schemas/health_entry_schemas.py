from marshmallow import Schema, fields, validate, post_load


class HealthEntrySchema(Schema):
    """
    Request body for a new health entry.

    Only structure and types are checked here; unit tags, value ranges and
    the entry date are validated by the domain model.
    """
    date = fields.Str(
        required=True,
        validate=validate.Length(min=1, error="Date is required")
    )
    weight = fields.Float(required=True)
    weight_unit = fields.Str(required=True)
    waist_size = fields.Float(required=True)
    waist_unit = fields.Str(required=True)

    @post_load
    def clean_data(self, data, **kwargs):
        """Clean and normalize data after validation"""
        for key, value in data.items():
            if isinstance(value, str):
                data[key] = value.strip()
        return data
