from django.contrib.auth import authenticate
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from rest_framework.authtoken.models import Token
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from .permissions import MANAGER_GROUP


def _error(detail: str, status_code: int):
    """Consistent error payload shape across API: {'detail': ...}."""
    return JsonResponse({'detail': detail}, status=status_code)


@csrf_exempt
@api_view(['POST'])
@permission_classes([AllowAny])
def login_view(request):
    """
    Login endpoint that returns a token and the user's market roles
    """
    data = request.data
    username = data.get('username')
    password = data.get('password')

    if not username or not password:
        return _error('Username and password required', 400)

    user = authenticate(username=username, password=password)
    if not user:
        return _error('Invalid credentials', 401)

    token, _ = Token.objects.get_or_create(user=user)

    return JsonResponse({
        'token': token.key,
        'username': user.username,
        'is_staff': user.is_staff,
        'is_manager': user.is_staff or user.groups.filter(name=MANAGER_GROUP).exists(),
    })
