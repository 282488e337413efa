import logging

from django.core import signing
from django.core.exceptions import FieldError, ImproperlyConfigured
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.platform.conf import platform_settings
from core.screen.fields.relation import SIGNING_SALT
from core.screen.sources import source_from_descriptor

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def relation_search(request):
    """
    Search options for a Relation field.

    Body:
    - source: signed source descriptor rendered with the field
    - search: term matched against the display attribute
    """
    try:
        descriptor = signing.loads(request.data.get('source') or '', salt=SIGNING_SALT)
        source = source_from_descriptor(descriptor)
    except signing.BadSignature:
        logger.warning(f"Rejected relation search with a bad source signature from user {request.user.pk}")
        return Response({'source': ['Invalid relation source.']}, status=status.HTTP_400_BAD_REQUEST)
    except (LookupError, ImportError, ImproperlyConfigured) as e:
        return Response({'source': [str(e)]}, status=status.HTTP_400_BAD_REQUEST)

    limit = platform_settings.get('relation.search_limit', 10)
    try:
        options = source.search(request.data.get('search', ''), limit)
    except FieldError as e:
        logger.warning(f"Relation search on {source} failed: {e}")
        return Response({'search': [f"'{source.name}' is not a searchable field."]}, status=status.HTTP_400_BAD_REQUEST)
    return Response([{'id': option.key, 'text': option.label} for option in options])
