from django.urls import reverse
from rest_framework import mixins
from rest_framework import serializers
from rest_framework import status
from rest_framework.response import Response

from ippweek.core.exceptions import BadRequestAlertException
from ippweek.core.headers import create_entity_creation_alert
from ippweek.core.headers import create_entity_update_alert


class CreateOrUpdateMixin(mixins.CreateModelMixin):
    """Mixin for creating or updating objects on the collection endpoint.

    POST /{prefix}  create, the id must NOT be part of the request data.
    PUT  /{prefix}  update when the id is part of the request data,
                    otherwise fall back to create.

    Must be used with GenericViewSet because we need some method from it.
    Subclasses set ``entity_name`` (used in alerts and errors) and
    ``detail_url_name`` (reversed to build the Location header).
    """

    entity_name = None
    detail_url_name = None
    # ids are BIGINT: anything outside 1..2**63-1 can never be stored
    object_id_field = serializers.IntegerField(min_value=1, max_value=2**63 - 1)

    _object = None

    def get_raw_object_id(self, request):
        """
        Get the id from the raw request data.
        We cant rely on get_object as it require lookup from url
        eg: /{prefix}/{pk}
        """
        raw_data = request.data
        if not hasattr(raw_data, "get"):
            # not a mapping, the serializer will reject it
            return None
        object_id = raw_data.get("id")
        if object_id in (None, ""):
            return None
        return object_id

    def parse_object_id(self, raw_id):
        """Validate an id from the body or the url, booleans and fractions included."""
        try:
            return self.object_id_field.run_validation(raw_id)
        except serializers.ValidationError as exc:
            raise BadRequestAlertException(
                f"Invalid {self.entity_name} ID", self.entity_name, "idinvalid",
            ) from exc

    def get_object_or_none(self, object_id):
        queryset = self.filter_queryset(self.get_queryset())
        return queryset.filter(pk=object_id).first()

    def get_location(self, object_id) -> str:
        return reverse(self.detail_url_name, kwargs={self.lookup_field: object_id})

    def create(self, request, *args, **kwargs):
        if self.get_raw_object_id(request) is not None:
            raise BadRequestAlertException(
                f"A new {self.entity_name} cannot already have an ID",
                self.entity_name,
                "idexists",
            )
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)

        object_id = serializer.instance.pk
        headers = {
            "Location": self.get_location(object_id),
            **create_entity_creation_alert(self.entity_name, object_id),
        }
        return Response(serializer.data, status=status.HTTP_201_CREATED, headers=headers)

    def create_or_update(self, request, *args, **kwargs):
        """
        Update an instance (Not collections) when the id is part of the
        request data, create it otherwise.
        eg:
        {
            "id": 1,
            "nom": "Paris",
        }

        An unknown id is not an error: the instance is saved under that id.

        Do not use router with this as the method binding of router do not
        correspond to our requirements
        eg:
            requirement: Put {detail: False} createOrUpdate => PUT /{prefix}
            drf_router: Put {detail: True} update => PUT /{prefix}/{id}
        Instead we need to bind the methods and actions manually
        eg:
        SomeViewSet.as_view({"put": "create_or_update"})
        """
        raw_id = self.get_raw_object_id(request)
        if raw_id is None:
            return self.create(request, *args, **kwargs)

        object_id = self.parse_object_id(raw_id)
        self._object = self.get_object_or_none(object_id)
        if self._object is None:
            self._object = self.get_queryset().model(pk=object_id)
        return self.update_data(request, *args, **kwargs)

    def update_data(self, request, *args, **kwargs):
        """
        Update a model instance.
        """
        partial = kwargs.pop("partial", False)
        instance = self._object
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        self.perform_update_data(serializer)

        if getattr(instance, "_prefetched_objects_cache", None):
            # If 'prefetch_related' has been applied to a queryset, we need to
            # forcibly invalidate the prefetch cache on the instance.
            # ruff: noqa:SLF001
            instance._prefetched_objects_cache = {}

        headers = create_entity_update_alert(self.entity_name, serializer.instance.pk)
        return Response(serializer.data, status=status.HTTP_200_OK, headers=headers)

    def perform_update_data(self, serializer):
        serializer.save()
