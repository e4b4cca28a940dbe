"""
健身活动接口测试
重点测试活动对图片集合的拥有关系：随活动创建、整体替换、随活动删除
"""

from fastapi import status


class TestFitnessActivity:
    """健身活动测试"""

    def test_create_activity_with_images(self, client, sample_activity_data):
        """测试创建带图片的活动"""
        response = client.post("/api/fitness-activities", json=sample_activity_data)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["title"] == sample_activity_data["title"]
        assert data["signStartTime"] == sample_activity_data["signStartTime"]
        assert data["activityEndTime"] == sample_activity_data["activityEndTime"]
        assert [img["src"] for img in data["images"]] == [
            img["src"] for img in sample_activity_data["images"]
        ]
        assert all(img["id"] is not None for img in data["images"])
        assert all(img["activityId"] == data["id"] for img in data["images"])
        assert response.headers["X-dlifeApp-alert"] == "dlifeApp.fitnessActivity.created"

        # 图片也可以通过图片接口查询
        pics = client.get("/api/pics").json()
        assert len(pics) == 2

    def test_update_replaces_image_set(self, client, sample_activity_data):
        """测试整体更新时图片集合被替换，旧图片被删除"""
        created = client.post("/api/fitness-activities", json=sample_activity_data).json()
        kept = created["images"][0]

        update = dict(sample_activity_data, id=created["id"], attendCount=3)
        update["images"] = [kept, {"src": "https://img.example.com/run-3.jpg"}]
        response = client.put("/api/fitness-activities", json=update)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["attendCount"] == 3
        srcs = [img["src"] for img in data["images"]]
        assert srcs == [kept["src"], "https://img.example.com/run-3.jpg"]
        assert data["images"][0]["id"] == kept["id"]

        pic_ids = {pic["id"] for pic in client.get("/api/pics").json()}
        assert pic_ids == {img["id"] for img in data["images"]}
        assert created["images"][1]["id"] not in pic_ids

    def test_delete_activity_removes_images(self, client, sample_activity_data):
        """测试删除活动时一并删除图片"""
        created = client.post("/api/fitness-activities", json=sample_activity_data).json()

        response = client.delete(f"/api/fitness-activities/{created['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert client.get(f"/api/fitness-activities/{created['id']}").status_code == status.HTTP_404_NOT_FOUND
        assert client.get("/api/pics").json() == []

    def test_title_too_long(self, client, sample_activity_data):
        """测试标题超过 64 个字符"""
        payload = dict(sample_activity_data, title="跑" * 65)
        response = client.post("/api/fitness-activities", json=payload)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_activity_without_images(self, client):
        """测试只有标题的最小活动"""
        response = client.post("/api/fitness-activities", json={"title": "午间瑜伽"})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["images"] == []
        assert data["attendCount"] is None


class TestAttendee:
    """参与者测试"""

    def test_join_activity(self, client, sample_activity_data):
        """测试报名活动，状态默认 JOINED"""
        activity = client.post("/api/fitness-activities", json=sample_activity_data).json()

        response = client.post("/api/attendees", json={
            "activityId": activity["id"],
            "wechatUserId": "o6_runner_2",
            "nickName": "小李",
            "joinTime": "2024-05-02T12:30:00",
        })

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["status"] == "JOINED"
        assert data["activityId"] == activity["id"]
        assert response.headers["Location"] == f"/api/attendees/{data['id']}"
        assert response.headers["X-dlifeApp-alert"] == "dlifeApp.attendee.created"

    def test_change_attendee_status(self, client):
        """测试更新参与状态"""
        created = client.post("/api/attendees", json={"wechatUserId": "o6_runner_3"}).json()

        response = client.put("/api/attendees", json={
            "id": created["id"],
            "wechatUserId": "o6_runner_3",
            "status": "QUIT",
        })

        assert response.status_code == status.HTTP_200_OK
        assert client.get(f"/api/attendees/{created['id']}").json()["status"] == "QUIT"

    def test_invalid_status(self, client):
        """测试非法的参与状态"""
        response = client.post("/api/attendees", json={"wechatUserId": "u", "status": "MAYBE"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_delete_activity_with_attendees_is_rejected(self, client, sample_activity_data):
        """测试删除仍有参与者的活动：外键拒绝删除，返回409，参与者保持不变"""
        activity = client.post("/api/fitness-activities", json=sample_activity_data).json()
        attendee = client.post("/api/attendees", json={
            "activityId": activity["id"],
            "wechatUserId": "o6_runner_4",
        }).json()

        response = client.delete(f"/api/fitness-activities/{activity['id']}")

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["errorKey"] == "constraintviolation"
        assert response.headers["X-dlifeApp-error"] == "error.constraintviolation"
        assert client.get(f"/api/fitness-activities/{activity['id']}").status_code == status.HTTP_200_OK
        assert client.get(f"/api/attendees/{attendee['id']}").json()["activityId"] == activity["id"]
        assert len(client.get("/api/pics").json()) == 2

    def test_delete_activity_after_attendees_leave(self, client, sample_activity_data):
        """测试参与者先删除后，活动可以正常删除"""
        activity = client.post("/api/fitness-activities", json=sample_activity_data).json()
        attendee = client.post("/api/attendees", json={
            "activityId": activity["id"],
            "wechatUserId": "o6_runner_5",
        }).json()

        client.delete(f"/api/attendees/{attendee['id']}")
        response = client.delete(f"/api/fitness-activities/{activity['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert client.get(f"/api/fitness-activities/{activity['id']}").status_code == status.HTTP_404_NOT_FOUND
