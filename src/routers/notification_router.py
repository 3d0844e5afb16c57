from fastapi import APIRouter, Depends, Query
from ..services.notification_service import NotificationService
from ..schemas import CurrentUser
from ..security import get_current_user

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("/")
async def get_notifications(
    limit: int = Query(50, ge=1, le=200),
    skip: int = Query(0, ge=0),
    unread_only: bool = False,
    current_user: CurrentUser = Depends(get_current_user)
):
    """
    Lấy danh sách thông báo của người dùng hiện tại
    """
    return await NotificationService.get_user_notifications(
        user_id=current_user.userId,
        limit=limit,
        skip=skip,
        unread_only=unread_only
    )


@router.get("/unread-count")
async def get_unread_count(
    current_user: CurrentUser = Depends(get_current_user)
):
    count = await NotificationService.get_unread_count(current_user.userId)
    return {"count": count}


@router.put("/read-all")
async def mark_all_notifications_as_read(
    current_user: CurrentUser = Depends(get_current_user)
):
    await NotificationService.mark_all_as_read(current_user.userId)
    return {"message": "All notifications marked as read."}


@router.put("/{notification_id}/read")
async def mark_notification_as_read(
    notification_id: str,
    current_user: CurrentUser = Depends(get_current_user)
):
    notification = await NotificationService.mark_as_read(
        notification_id=notification_id,
        user_id=current_user.userId
    )
    return {"message": "Notification marked as read.", "notification": notification}


@router.delete("/{notification_id}")
async def delete_notification(
    notification_id: str,
    current_user: CurrentUser = Depends(get_current_user)
):
    await NotificationService.delete_notification(
        notification_id=notification_id,
        user_id=current_user.userId
    )
    return {"message": "Notification deleted."}
